"""
================================================================================
UI Testing Framework
================================================================================

Remote WebDriver session lifecycle for pytest UI tests.

Components:
    - capabilities: browser-specific capability sets
    - session_policy: `no_browser` marker handling
    - session: NullSession / LiveSession handles
    - remote_client: selenium `webdriver.Remote` adapter
    - session_launcher: session creation with bounded retry
    - session_teardown: best-effort session release
    - lifecycle_listener: start/end coordination per test
    - test_case: WebDriverTestCase base class
    - config_loader: YAML/env configuration and SessionConfig

Author: Automation Team
License: MIT
================================================================================
"""

from .capabilities import BrowserType, build_capabilities
from .config_loader import ConfigLoader, SessionConfig
from .errors import (
    ConfigurationError,
    LaunchErrorKind,
    NullSessionError,
    SessionLifecycleError,
    UsageError,
)
from .lifecycle_listener import LifecycleListener
from .remote_client import SeleniumRemoteClient
from .session import LiveSession, NullSession, SessionKind, is_live
from .session_launcher import SessionLauncher, classify_launch_error
from .session_policy import (
    NO_BROWSER_MARKER,
    SkipFlags,
    TestIdentity,
    resolve_session_policy,
)
from .session_teardown import teardown_session
from .test_case import WebDriverTestCase

__all__ = [
    "BrowserType",
    "build_capabilities",
    "ConfigLoader",
    "SessionConfig",
    "ConfigurationError",
    "LaunchErrorKind",
    "NullSessionError",
    "SessionLifecycleError",
    "UsageError",
    "LifecycleListener",
    "SeleniumRemoteClient",
    "LiveSession",
    "NullSession",
    "SessionKind",
    "is_live",
    "SessionLauncher",
    "classify_launch_error",
    "NO_BROWSER_MARKER",
    "SkipFlags",
    "TestIdentity",
    "resolve_session_policy",
    "teardown_session",
    "WebDriverTestCase",
]
