"""
================================================================================
Remote WebDriver Client
================================================================================

Thin adapter over `selenium.webdriver.Remote`.

The launcher only needs one operation from the remote side - "create a
session" - so the adapter exposes exactly that and returns a LiveSession.
Everything else (execute/close/quit) is called on the WebDriver held by the
LiveSession.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

import urllib3
from loguru import logger
from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.client_config import ClientConfig

from .session import LiveSession


class RemoteClient(Protocol):
    """Anything able to create a remote browser session."""

    def create(
        self,
        url: str,
        capabilities: Dict[str, Any],
        connect_timeout_ms: int,
        request_timeout_ms: int,
    ) -> LiveSession:
        ...


def build_options(capabilities: Dict[str, Any]) -> ArgOptions:
    """Wrap a plain capability dict into selenium options."""
    options = ArgOptions()
    for name, value in capabilities.items():
        options.set_capability(name, value)
    return options


def build_client_config(url: str, connect_timeout_ms: int, request_timeout_ms: int) -> ClientConfig:
    # urllib3 accepts separate connect/read limits; the read limit covers the
    # time a new-session request may wait in the hub queue for a free node.
    timeout = urllib3.Timeout(
        connect=connect_timeout_ms / 1000,
        read=request_timeout_ms / 1000,
    )
    return ClientConfig(remote_server_addr=url, timeout=timeout)


class SeleniumRemoteClient:
    """Creates sessions on a Selenium Grid hub via `webdriver.Remote`."""

    def create(
        self,
        url: str,
        capabilities: Dict[str, Any],
        connect_timeout_ms: int,
        request_timeout_ms: int,
    ) -> LiveSession:
        """
        Create a new remote session.

        Args:
            url: Hub endpoint (e.g. http://localhost:4444/wd/hub)
            capabilities: Capability set from the capability builder
            connect_timeout_ms: TCP connect timeout
            request_timeout_ms: Per-request read timeout

        Returns:
            LiveSession wrapping the new WebDriver

        Raises:
            selenium.common.exceptions.WebDriverException: hub refused or failed
        """
        logger.debug(
            f"Requesting new session at {url} "
            f"(connect={connect_timeout_ms}ms, request={request_timeout_ms}ms)"
        )
        driver = webdriver.Remote(
            command_executor=url,
            options=build_options(capabilities),
            client_config=build_client_config(url, connect_timeout_ms, request_timeout_ms),
        )
        return LiveSession(
            session_id=driver.session_id,
            browser_name=capabilities.get("browserName", ""),
            client=driver,
            capabilities=dict(capabilities),
        )


__all__ = [
    "RemoteClient",
    "SeleniumRemoteClient",
    "build_options",
    "build_client_config",
]
