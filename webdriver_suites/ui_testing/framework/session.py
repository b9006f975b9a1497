"""
================================================================================
Session Handles
================================================================================

The handle stored on a test's `wd` slot for the duration of one test.

    NullSession  - test runs without a browser (`no_browser` marker)
    LiveSession  - remote WebDriver session created on the hub

Handles are tagged with `kind`, so callers dispatch on the tag rather than on
the concrete class. A LiveSession forwards unknown attributes to the
underlying WebDriver, so tests can write `self.wd.get(url)` directly.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union

from .errors import NullSessionError


class SessionKind(str, Enum):
    NULL = "null"
    LIVE = "live"


class NullSession:
    """
    Stand-in WebDriver for tests that must not touch a browser.

    Any attempt to drive the browser raises NullSessionError.
    """

    kind = SessionKind.NULL

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        raise NullSessionError(
            f"You cannot use WebDriver ('{name}') in a test marked with no_browser"
        )

    def __repr__(self) -> str:
        return "NullSession()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullSession)

    def __hash__(self) -> int:
        return hash(NullSession)


@dataclass
class LiveSession:
    """Remote browser session created on the hub."""

    session_id: str
    browser_name: str
    client: Any = field(repr=False)
    capabilities: Dict[str, Any] = field(default_factory=dict, repr=False)

    kind = SessionKind.LIVE

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the dataclass does not define
        client = self.__dict__.get("client")
        if client is None or name.startswith("_"):
            raise AttributeError(name)
        return getattr(client, name)


SessionHandle = Union[NullSession, LiveSession]


def is_live(handle: Any) -> bool:
    """True for a LiveSession handle, False for NullSession, None or anything else."""
    return getattr(handle, "kind", None) is SessionKind.LIVE


__all__ = [
    "SessionKind",
    "NullSession",
    "LiveSession",
    "SessionHandle",
    "is_live",
]
