"""
================================================================================
Capability Builder
================================================================================

Builds the capability set sent to the Selenium hub when a session is created.

Every session starts from the same base set (browser name + any platform);
browser-specific overrides are then applied by one function per known browser.
Unknown browser names pass through untouched so that a newer grid browser can
be targeted without changing this module.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict


CapabilitySet = Dict[str, Any]

PLATFORM_ANY = "ANY"

FIREFOX_OPTIONS_KEY = "moz:firefoxOptions"
IE_OPTIONS_KEY = "se:ieOptions"

# Firefox does not fire "focus" and "change" DOM events while its window is not
# focused; concurrent test runs need them anyway.
FIREFOX_FOCUS_TESTMODE_PREF = "focusmanager.testmode"

# Clears cache, cookies, history and saved form data before the session starts.
IE_ENSURE_CLEAN_SESSION = "ie.ensureCleanSession"


class BrowserType:
    """Browser names understood by the Selenium hub."""

    FIREFOX = "firefox"
    CHROME = "chrome"
    IE = "internet explorer"
    SAFARI = "safari"
    PHANTOMJS = "phantomjs"

    ALIASES: Dict[str, str] = {
        "ie": IE,
        "internetexplorer": IE,
        "internet_explorer": IE,
    }

    @classmethod
    def normalize(cls, browser_name: str) -> str:
        """Map aliases such as ``ie`` onto the name the hub expects."""
        name = (browser_name or "").strip()
        return cls.ALIASES.get(name.lower(), name)


def base_capabilities(browser_name: str) -> CapabilitySet:
    """Capabilities common to every browser."""
    return {
        "browserName": browser_name,
        "platformName": PLATFORM_ANY,
    }


def setup_firefox_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    firefox_options = capabilities.setdefault(FIREFOX_OPTIONS_KEY, {})
    prefs = firefox_options.setdefault("prefs", {})
    prefs[FIREFOX_FOCUS_TESTMODE_PREF] = True
    return capabilities


def setup_chrome_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    return capabilities


def setup_internet_explorer_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    ie_options = capabilities.setdefault(IE_OPTIONS_KEY, {})
    ie_options[IE_ENSURE_CLEAN_SESSION] = True
    return capabilities


def setup_safari_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    return capabilities


def setup_phantomjs_capabilities(capabilities: CapabilitySet) -> CapabilitySet:
    return capabilities


BROWSER_SETUPS: Dict[str, Callable[[CapabilitySet], CapabilitySet]] = {
    BrowserType.FIREFOX: setup_firefox_capabilities,
    BrowserType.CHROME: setup_chrome_capabilities,
    BrowserType.IE: setup_internet_explorer_capabilities,
    BrowserType.SAFARI: setup_safari_capabilities,
    BrowserType.PHANTOMJS: setup_phantomjs_capabilities,
}


def setup_custom_capabilities(capabilities: CapabilitySet, browser_name: str) -> CapabilitySet:
    """
    Apply browser-specific overrides to an existing capability set.

    Args:
        capabilities: Capability set to extend (a deep copy is modified)
        browser_name: Target browser name

    Returns:
        New capability set; unchanged copy for unknown browsers
    """
    capabilities = copy.deepcopy(capabilities)
    setup = BROWSER_SETUPS.get(BrowserType.normalize(browser_name))
    if setup is None:
        return capabilities
    return setup(capabilities)


def build_capabilities(browser_name: str) -> CapabilitySet:
    """
    Build the final capability set for a browser.

    Args:
        browser_name: Browser name from configuration (aliases accepted)

    Returns:
        Capability dict ready to be sent to the hub

    Examples:
        >>> build_capabilities("chrome")
        {'browserName': 'chrome', 'platformName': 'ANY'}
    """
    browser_name = BrowserType.normalize(browser_name)
    return setup_custom_capabilities(base_capabilities(browser_name), browser_name)


__all__ = [
    "BrowserType",
    "CapabilitySet",
    "base_capabilities",
    "build_capabilities",
    "setup_custom_capabilities",
    "FIREFOX_OPTIONS_KEY",
    "FIREFOX_FOCUS_TESTMODE_PREF",
    "IE_OPTIONS_KEY",
    "IE_ENSURE_CLEAN_SESSION",
]
