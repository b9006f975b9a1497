"""
================================================================================
WebDriver Tools
================================================================================

Ambient utilities shared by the test runner and the pytest suites.

Modules:
    - common: loguru logging setup
    - report_tools: Allure attachment helpers for browser sessions

Example:
    from webdriver_tools.common import init_logger
    from webdriver_tools.report_tools.allure_utils import attach_session_failure_artifacts

    init_logger(level="DEBUG")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
