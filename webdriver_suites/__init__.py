"""
Test suites package.

Kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - the UI framework under `webdriver_suites.ui_testing.framework`
"""
