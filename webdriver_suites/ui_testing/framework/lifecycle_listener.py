"""
================================================================================
Lifecycle Listener
================================================================================

Initializes a WebDriver session before each test and destroys it afterwards.

This runs from pytest hooks rather than from fixtures: the failure report of
the `call` phase is produced before `teardown`, so a screenshot can still be
taken from the live browser when a test fails.

Flow:
    start_test -> policy -> NullSession
                         -> capabilities -> launcher -> LiveSession
    end_test   -> LiveSession -> teardown

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

from .capabilities import build_capabilities
from .config_loader import SessionConfig
from .errors import UsageError
from .session import NullSession, SessionHandle, is_live
from .session_launcher import SessionLauncher
from .session_policy import NO_BROWSER_MARKER, SkipFlags, TestIdentity, resolve_session_policy
from .session_teardown import teardown_session
from .test_case import WebDriverTestCase


class LifecycleListener:
    """
    Coordinates session start and end for one test at a time.

    Usage:
        >>> listener = LifecycleListener(SessionConfig.from_loader())
        >>> listener.start_test(test, identity, skip_flags)
        >>> ...  # test body uses test.wd
        >>> listener.end_test(test, identity)
    """

    def __init__(self, config: SessionConfig, launcher: Optional[SessionLauncher] = None):
        self.config = config
        self.launcher = launcher or SessionLauncher()

    @staticmethod
    def _ensure_test_case(test: Any) -> WebDriverTestCase:
        if not isinstance(test, WebDriverTestCase):
            raise UsageError(
                f"Test case must be a subclass of WebDriverTestCase, got {type(test).__name__}"
            )
        return test

    def start_test(self, test: Any, identity: TestIdentity, skip_flags: SkipFlags) -> SessionHandle:
        """
        Attach a session handle to the test.

        Args:
            test: Test class instance
            identity: Class and method name of the test
            skip_flags: `no_browser` marker on class / method

        Returns:
            The handle stored on `test.wd`

        Raises:
            UsageError: test is not a WebDriverTestCase
            WebDriverException: session could not be started
        """
        test = self._ensure_test_case(test)
        test._current_test = str(identity)

        decision = resolve_session_policy(skip_flags.class_level, skip_flags.method_level)
        if decision.skip:
            test.wd = NullSession()
            test.log(
                'Initializing Null WebDriver for "%s" (@%s marker used %s)',
                identity,
                NO_BROWSER_MARKER,
                decision.reason,
            )
            return test.wd

        test.log('Initializing "%s" WebDriver for "%s"', self.config.browser_name, identity)

        capabilities = build_capabilities(self.config.browser_name)
        test.wd = self.launcher.launch(
            self.config.hub_url,
            capabilities,
            self.config.connect_timeout_ms,
            self.config.request_timeout_ms,
            warn=test.warn,
        )
        return test.wd

    def end_test(self, test: Any, identity: TestIdentity, elapsed: Optional[float] = None) -> None:
        """
        Release the test's session, if it has a live one.

        Args:
            test: Test class instance
            identity: Class and method name of the test
            elapsed: Test duration in seconds, for the log line
        """
        test = self._ensure_test_case(test)
        handle = test.wd

        if is_live(handle):
            duration = f" after {elapsed:.2f}s" if elapsed is not None else ""
            test.log(
                'Destroying "%s" WebDriver for "%s" (session %s)%s',
                handle.browser_name or self.config.browser_name,
                identity,
                handle.session_id,
                duration,
            )
            teardown_session(handle, warn=test.warn)

        # A handle is never reused by the next test
        test.wd = None


__all__ = ["LifecycleListener"]
