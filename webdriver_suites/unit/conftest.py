"""
Shared fakes for the session lifecycle unit tests.

No grid is needed: the remote client and the WebDriver are replaced by small
in-memory fakes that record every call.
"""

from typing import Any, Dict, List, Optional

import pytest
from loguru import logger
from selenium.common.exceptions import WebDriverException

from webdriver_suites.ui_testing.framework.session import LiveSession


LOCKING_PORT_MESSAGE = "Unable to bind to locking port 7054 within 45000 ms"
FORWARDING_MESSAGE = "Error forwarding the new session Empty pool of VM for setup Capabilities"


class FakeDriver:
    """Records execute/close/quit calls; raises for the steps listed in `fail_on`."""

    def __init__(self, fail_on=(), session_id: str = "fake-session"):
        self.calls: List[Any] = []
        self.fail_on = set(fail_on)
        self.session_id = session_id
        self.current_url = "https://example.com/page"

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name,) + args if args else name)
        if name in self.fail_on:
            raise WebDriverException(f"{name} failed")

    def execute(self, command: str, params: Optional[Dict[str, Any]] = None) -> None:
        self._record("execute", command)

    def close(self) -> None:
        self._record("close")

    def quit(self) -> None:
        self._record("quit")

    def get(self, url: str) -> None:
        self._record("get", url)

    def get_screenshot_as_png(self) -> bytes:
        if "screenshot" in self.fail_on:
            raise WebDriverException("screenshot failed")
        return b"\x89PNG fake"


class FakeRemoteClient:
    """
    Remote client whose create() raises the queued errors in order, then succeeds.

    A `None` entry in `errors` means "succeed on this attempt".
    """

    def __init__(self, errors=()):
        self.errors = list(errors)
        self.requests: List[Dict[str, Any]] = []
        self.drivers: List[FakeDriver] = []

    @property
    def attempts(self) -> int:
        return len(self.requests)

    def create(self, url, capabilities, connect_timeout_ms, request_timeout_ms) -> LiveSession:
        self.requests.append(
            {
                "url": url,
                "capabilities": capabilities,
                "connect_timeout_ms": connect_timeout_ms,
                "request_timeout_ms": request_timeout_ms,
            }
        )
        if self.errors:
            error = self.errors.pop(0)
            if error is not None:
                raise error

        session_id = f"session-{self.attempts}"
        driver = FakeDriver(session_id=session_id)
        self.drivers.append(driver)
        return LiveSession(
            session_id=session_id,
            browser_name=capabilities.get("browserName", ""),
            client=driver,
            capabilities=dict(capabilities),
        )


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def make_driver():
    return FakeDriver


@pytest.fixture
def make_client():
    return FakeRemoteClient


@pytest.fixture
def locking_port_error():
    """Factory for Firefox locking-port collisions."""
    return lambda: WebDriverException(LOCKING_PORT_MESSAGE)


@pytest.fixture
def forwarding_error():
    return lambda: WebDriverException(FORWARDING_MESSAGE)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
