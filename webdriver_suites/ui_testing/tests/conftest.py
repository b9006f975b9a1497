"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Drives the remote WebDriver session lifecycle from pytest hooks.

Key Features:
- One session per test, created before setup fixtures and released after
  teardown fixtures
- `no_browser` marker for tests that need no browser (NullSession)
- Screenshot, URL and session details attached to Allure on failure, while
  the browser is still open

================================================================================
"""

import time

import pytest
from loguru import logger

from webdriver_suites.ui_testing.framework.config_loader import ConfigLoader, SessionConfig
from webdriver_suites.ui_testing.framework.lifecycle_listener import LifecycleListener
from webdriver_suites.ui_testing.framework.session import is_live
from webdriver_suites.ui_testing.framework.session_policy import (
    identity_from_item,
    is_placeholder_test,
    skip_flags_from_item,
)
from webdriver_suites.ui_testing.framework.test_case import WebDriverTestCase
from webdriver_tools.report_tools.allure_utils import attach_session_failure_artifacts


LISTENER_KEY = pytest.StashKey[LifecycleListener]()
START_TIME_KEY = pytest.StashKey[float]()


def _get_listener(config: pytest.Config) -> LifecycleListener:
    """Create the listener on first use, from YAML/env config plus CLI options."""
    listener = config.stash.get(LISTENER_KEY, None)
    if listener is None:
        session_config = SessionConfig.from_loader(ConfigLoader()).with_overrides(
            server_url=config.getoption("server_url", None),
            browser_name=config.getoption("browser_name", None),
        )
        logger.info(
            f"WebDriver sessions: browser={session_config.browser_name}, "
            f"hub={session_config.hub_url}"
        )
        listener = LifecycleListener(session_config)
        config.stash[LISTENER_KEY] = listener
    return listener


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item):
    """Attach a session handle to the test before any fixture runs."""
    if is_placeholder_test(item):
        return

    item.stash[START_TIME_KEY] = time.monotonic()
    _get_listener(item.config).start_test(
        item.instance,
        identity_from_item(item),
        skip_flags_from_item(item),
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture browser artifacts on test failure.

    Runs before the teardown phase, so the session is still open.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed or is_placeholder_test(item):
        return

    instance = item.instance
    if isinstance(instance, WebDriverTestCase) and is_live(instance.wd):
        attach_session_failure_artifacts(instance.wd)


@pytest.hookimpl(trylast=True)
def pytest_runtest_teardown(item, nextitem):
    """Release the session after all teardown fixtures have run."""
    if is_placeholder_test(item):
        return

    started = item.stash.get(START_TIME_KEY, None)
    elapsed = time.monotonic() - started if started is not None else None
    _get_listener(item.config).end_test(item.instance, identity_from_item(item), elapsed)
