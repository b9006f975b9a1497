"""
================================================================================
Session Launcher
================================================================================

Creates the remote browser session with bounded retry.

Session startup on a shared grid can fail for reasons that have nothing to do
with the test. Only one such failure is known to be transient: Firefox on a
busy node colliding with another Firefox instance on its locking port. That
case is retried (fixed 1 second pause, 4 attempts in total); every other
failure is raised immediately.

Retry Decision Table:
    Firefox locking port collision   -> warn, sleep, retry
    Hub cannot forward to a node     -> warn (node not registered?), raise
    Anything else                    -> raise

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from loguru import logger
from selenium.common.exceptions import WebDriverException

from .capabilities import BrowserType
from .errors import LaunchErrorKind
from .remote_client import RemoteClient, SeleniumRemoteClient
from .session import LiveSession


MAX_START_ATTEMPTS = 4
START_RETRY_DELAY_SECONDS = 1.0

# (message substring, kind, browsers the rule applies to - None means any).
# The substrings are the error text of the Selenium server and of the Firefox
# driver; they change whenever those projects reword their messages.
LAUNCH_ERROR_PATTERNS: Tuple[Tuple[str, LaunchErrorKind, Optional[FrozenSet[str]]], ...] = (
    (
        "Unable to bind to locking port",
        LaunchErrorKind.FIREFOX_LOCKING_PORT,
        frozenset({BrowserType.FIREFOX}),
    ),
    (
        "Error forwarding the new session",
        LaunchErrorKind.NODE_UNAVAILABLE,
        None,
    ),
)


def classify_launch_error(error: BaseException, browser_name: str) -> LaunchErrorKind:
    """
    Classify a session-creation failure.

    Only errors reported by the WebDriver stack are inspected; anything else
    (programming errors, interrupted runs) is OTHER.
    """
    if not isinstance(error, WebDriverException):
        return LaunchErrorKind.OTHER

    message = str(error)
    browser_name = BrowserType.normalize(browser_name)
    for substring, kind, browsers in LAUNCH_ERROR_PATTERNS:
        if substring not in message:
            continue
        if browsers is not None and browser_name not in browsers:
            continue
        return kind
    return LaunchErrorKind.OTHER


class LaunchState(str, Enum):
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass
class RetryState:
    """Attempt bookkeeping for a single launch() call."""

    max_attempts: int = MAX_START_ATTEMPTS
    attempt: int = 0
    last_error: Optional[BaseException] = None
    state: LaunchState = LaunchState.ATTEMPTING

    def record_success(self) -> None:
        self.attempt += 1
        self.state = LaunchState.SUCCEEDED

    def record_failure(self, error: BaseException) -> None:
        self.attempt += 1
        self.last_error = error
        if self.attempt >= self.max_attempts:
            self.state = LaunchState.EXHAUSTED

    @property
    def next_attempt(self) -> int:
        return self.attempt + 1


class SessionLauncher:
    """
    Launches remote WebDriver sessions.

    Usage:
        >>> launcher = SessionLauncher()
        >>> session = launcher.launch(
        ...     "http://localhost:4444/wd/hub",
        ...     build_capabilities("firefox"),
        ...     connect_timeout_ms=120000,
        ...     request_timeout_ms=180000,
        ... )
    """

    def __init__(
        self,
        client: Optional[RemoteClient] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_attempts: int = MAX_START_ATTEMPTS,
        retry_delay: float = START_RETRY_DELAY_SECONDS,
    ):
        """
        Initialize launcher.

        Args:
            client: Remote client used to create sessions (selenium by default)
            sleep: Pause function between retries; tests pass a no-op
            max_attempts: Total number of creation attempts
            retry_delay: Seconds to wait before a retry
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.client = client or SeleniumRemoteClient()
        self.sleep = sleep
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay

    def launch(
        self,
        server_url: str,
        capabilities: Dict[str, Any],
        connect_timeout_ms: int,
        request_timeout_ms: int,
        warn: Optional[Callable[[str], None]] = None,
    ) -> LiveSession:
        """
        Create a session, retrying the Firefox locking-port collision.

        Args:
            server_url: Hub endpoint
            capabilities: Final capability set (not modified)
            connect_timeout_ms: Connect timeout per attempt
            request_timeout_ms: Request timeout per attempt
            warn: Sink for warnings (the test's `warn` when called by the
                  listener); defaults to the module logger

        Returns:
            LiveSession on success

        Raises:
            The error of the last attempt, unchanged.
        """
        warn = warn or logger.warning
        browser_name = capabilities.get("browserName", "")
        retry = RetryState(max_attempts=self.max_attempts)

        while retry.state is LaunchState.ATTEMPTING:
            try:
                session = self.client.create(
                    server_url,
                    dict(capabilities),
                    connect_timeout_ms,
                    request_timeout_ms,
                )
            except Exception as error:
                retry.record_failure(error)
                kind = classify_launch_error(error, browser_name)

                if kind is LaunchErrorKind.NODE_UNAVAILABLE:
                    warn("Cannot execute test on the node. Maybe you started just the hub and not the node?")
                    raise
                if not kind.retryable:
                    raise
                if retry.state is LaunchState.EXHAUSTED:
                    break

                warn(
                    f"Firefox locking port is occupied; beginning attempt #{retry.next_attempt} "
                    f"to start it (\"{error}\")"
                )
                self.sleep(self.retry_delay)
                continue

            retry.record_success()
            logger.debug(f"Session {session.session_id} started after {retry.attempt} attempt(s)")
            return session

        warn(f"All {retry.attempt} attempts to instantiate {browser_name} WebDriver failed")
        raise retry.last_error


__all__ = [
    "MAX_START_ATTEMPTS",
    "START_RETRY_DELAY_SECONDS",
    "LAUNCH_ERROR_PATTERNS",
    "LaunchState",
    "RetryState",
    "SessionLauncher",
    "classify_launch_error",
]
