"""
Repository-level pytest configuration.

Why this exists:
  - Register the command-line options of the WebDriver session lifecycle;
    options must be declared in the root conftest to be parsed at startup
  - Enable `pytester` for the tests that run the lifecycle hooks in-process

Important:
  Grid and browser settings live in config/config.yaml. CI points
  SELENIUM_SERVER_URL at its grid and picks the browser with --browser-name
  or SELENIUM_BROWSER_NAME.
"""

from __future__ import annotations

from pathlib import Path

import pytest


pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    group = parser.getgroup("webdriver", "remote WebDriver sessions")
    group.addoption(
        "--server-url",
        action="store",
        default=None,
        help="Selenium server URL, e.g. http://localhost:4444 (overrides selenium.server_url)",
    )
    group.addoption(
        "--browser-name",
        action="store",
        default=None,
        help="Browser to start on the grid: firefox, chrome, ie, safari, phantomjs",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
