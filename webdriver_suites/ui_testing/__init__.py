"""UI testing package: remote WebDriver session lifecycle and UI tests."""
