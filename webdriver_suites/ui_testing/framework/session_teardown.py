"""
================================================================================
Session Teardown
================================================================================

Releases a remote browser session after a test.

Steps (each attempted even if an earlier one failed):
    1. deleteAllCookies - workaround for PhantomJS 1.x (ghostdriver #343)
       leaking cookies between sessions
    2. close            - close the current window
    3. quit             - end the session and free the node

Failures are logged and suppressed: the test has already finished, and a
broken session must not stop the rest of the run.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from loguru import logger
from selenium.webdriver.remote.command import Command

from .session import is_live


def teardown_session(handle: Any, warn: Optional[Callable[[str], None]] = None) -> List[str]:
    """
    Tear down a session handle.

    Args:
        handle: NullSession, LiveSession or None
        warn: Sink for step failures; defaults to the module logger

    Returns:
        Names of the steps that failed (empty list when everything succeeded
        or there was nothing to tear down)
    """
    if not is_live(handle):
        return []

    warn = warn or logger.warning
    client = handle.client
    steps = (
        ("deleteAllCookies", lambda: client.execute(Command.DELETE_ALL_COOKIES)),
        ("close", client.close),
        ("quit", client.quit),
    )

    failed: List[str] = []
    for name, step in steps:
        try:
            step()
        except Exception as e:
            failed.append(name)
            warn(f"Session {handle.session_id}: {name} failed during teardown: {e}")

    if failed:
        logger.debug(f"Session {handle.session_id} torn down with failed steps: {failed}")
    else:
        logger.debug(f"Session {handle.session_id} torn down")
    return failed


__all__ = ["teardown_session"]
