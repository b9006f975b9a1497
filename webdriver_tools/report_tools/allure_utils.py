"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used when a UI test fails while its browser session is
still open.

Features:
- Text / JSON attachment helpers
- Screenshot, page URL and session details of a live WebDriver session

================================================================================
"""

import json
from typing import Any, Dict

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(png: bytes, name: str = "Screenshot"):
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Session Artifacts
# ================================================================================

def attach_session_failure_artifacts(session: Any) -> Dict[str, bool]:
    """
    Attach screenshot, current URL and session details of a live session.

    Each artifact is captured independently; a browser that has already
    crashed may still report its URL, or vice versa. Capture failures are
    logged and never raised.

    Args:
        session: LiveSession (client must be a selenium WebDriver)

    Returns:
        Mapping artifact name -> whether it was attached
    """
    attached = {"session": False, "url": False, "screenshot": False}

    attach_json(
        {
            "session_id": session.session_id,
            "browser_name": session.browser_name,
            "capabilities": session.capabilities,
        },
        name="WebDriver Session",
    )
    attached["session"] = True

    try:
        attach_text(session.client.current_url, name="Current URL")
        attached["url"] = True
    except Exception as e:
        logger.warning(f"Failed to read current URL of session {session.session_id}: {e}")

    try:
        attach_png(session.client.get_screenshot_as_png(), name="failure_screenshot")
        attached["screenshot"] = True
    except Exception as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")

    return attached


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "attach_session_failure_artifacts",
]
