"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the test suites.
It registers the project markers and initializes logging.

================================================================================
"""

import pytest

from webdriver_tools.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    init_logger()

    # Session lifecycle markers
    config.addinivalue_line(
        "markers", "no_browser: run the test without a remote browser session (NullSession)"
    )

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Framework unit tests (no grid required)"
    )
    config.addinivalue_line(
        "markers", "ui: UI tests driven through remote WebDriver sessions"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the domain marker based on the directory a test lives in.
    """
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Remote WebDriver Session Lifecycle",
        "=" * 60,
        "",
    ]
