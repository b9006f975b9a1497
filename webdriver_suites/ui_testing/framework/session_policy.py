"""
================================================================================
Session Policy
================================================================================

Decides whether a test needs a real browser.

A test runs without a browser when the `no_browser` marker is applied to its
class (or module) or to the test function itself. Such tests get a
NullSession instead of a remote WebDriver.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

import pytest


NO_BROWSER_MARKER = "no_browser"


class SessionAction(str, Enum):
    SKIP = "skip"
    LAUNCH = "launch"


@dataclass(frozen=True)
class TestIdentity:
    """Class and method name of a running test."""

    __test__ = False

    class_name: str
    method_name: str

    def __str__(self) -> str:
        return f"{self.class_name}::{self.method_name}"


@dataclass(frozen=True)
class SkipFlags:
    class_level: bool = False
    method_level: bool = False


@dataclass(frozen=True)
class PolicyDecision:
    action: SessionAction
    reason: Optional[str] = None

    @property
    def skip(self) -> bool:
        return self.action is SessionAction.SKIP


def resolve_session_policy(class_flag: bool, method_flag: bool) -> PolicyDecision:
    """
    Resolve whether to launch a browser session.

    The class-level marker wins the attribution when both are set.

    Args:
        class_flag: `no_browser` set on the test class
        method_flag: `no_browser` set on the test method

    Returns:
        PolicyDecision - SKIP with "on class"/"on method" reason, or LAUNCH
    """
    if class_flag:
        return PolicyDecision(SessionAction.SKIP, "on class")
    if method_flag:
        return PolicyDecision(SessionAction.SKIP, "on method")
    return PolicyDecision(SessionAction.LAUNCH)


def _has_marker(marks: Any, name: str) -> bool:
    if marks is None:
        return False
    if not isinstance(marks, (list, tuple)):
        marks = [marks]
    return any(getattr(mark, "name", None) == name for mark in marks)


def _own_marks(obj: Any) -> Iterable[Any]:
    # pytestmark lives in the object's own namespace; getattr would pick up
    # marks inherited from a base class as well.
    if obj is None:
        return []
    namespace = getattr(obj, "__dict__", {})
    return namespace.get("pytestmark", [])


def skip_flags_from_item(item: Any, marker_name: str = NO_BROWSER_MARKER) -> SkipFlags:
    """
    Derive SkipFlags from a collected pytest item.

    Class level: marker on the test class (including base classes) or module.
    Method level: marker applied directly to the test function.
    """
    cls = getattr(item, "cls", None)
    class_level = False
    if cls is not None:
        class_level = any(_has_marker(_own_marks(klass), marker_name) for klass in cls.__mro__)
    module = getattr(item, "module", None)
    if not class_level and module is not None:
        class_level = _has_marker(getattr(module, "pytestmark", None), marker_name)

    function = getattr(item, "function", None)
    method_level = _has_marker(getattr(function, "pytestmark", None), marker_name)

    return SkipFlags(class_level=class_level, method_level=method_level)


def is_placeholder_test(item: Any) -> bool:
    """
    True for items pytest runs that are not real test functions.

    Doctest items, YAML-driven items and other non-Python items never get a
    browser session.
    """
    return not isinstance(item, pytest.Function)


def identity_from_item(item: Any) -> TestIdentity:
    """Build a TestIdentity from a pytest item."""
    cls = getattr(item, "cls", None)
    class_name = cls.__name__ if cls is not None else item.module.__name__
    return TestIdentity(class_name=class_name, method_name=item.name)


__all__ = [
    "NO_BROWSER_MARKER",
    "SessionAction",
    "TestIdentity",
    "SkipFlags",
    "PolicyDecision",
    "resolve_session_policy",
    "skip_flags_from_item",
    "identity_from_item",
    "is_placeholder_test",
]
