"""
================================================================================
Session Lifecycle Errors
================================================================================

Exception taxonomy for the remote WebDriver session lifecycle.

Launch failures are NOT wrapped: the selenium exception raised by the remote
client propagates unchanged, so callers see exactly what the hub reported.
`LaunchErrorKind` only classifies them for the retry decision.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum


class SessionLifecycleError(Exception):
    """Base class for session lifecycle errors."""
    pass


class UsageError(SessionLifecycleError, TypeError):
    """Raised when the listener is driven with a test of the wrong type."""
    pass


class NullSessionError(SessionLifecycleError, AttributeError):
    """
    Raised when a test marked `no_browser` tries to use the browser.

    Also an AttributeError, so `hasattr()` and `getattr(wd, name, default)`
    on a NullSession behave as for a missing attribute.
    """
    pass


class ConfigurationError(SessionLifecycleError):
    """Raised when configuration loading or access fails."""
    pass


class LaunchErrorKind(str, Enum):
    """Classification of a session-creation failure."""

    FIREFOX_LOCKING_PORT = "firefox_locking_port"
    NODE_UNAVAILABLE = "node_unavailable"
    OTHER = "other"

    @property
    def retryable(self) -> bool:
        return self is LaunchErrorKind.FIREFOX_LOCKING_PORT


__all__ = [
    "SessionLifecycleError",
    "UsageError",
    "NullSessionError",
    "ConfigurationError",
    "LaunchErrorKind",
]
