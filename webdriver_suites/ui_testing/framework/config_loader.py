"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading
    - Environment variable override (SELENIUM_SERVER_URL overrides selenium.server_url)
    - Dot notation path access
    - Immutable SessionConfig handed to the session lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .capabilities import BrowserType
from .errors import ConfigurationError


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_HUB_PATH = "/wd/hub"
DEFAULT_CONNECT_TIMEOUT_MS = 2 * 60 * 1000
# How long a request may take, including waiting in the hub queue for a free node
DEFAULT_REQUEST_TIMEOUT_MS = 3 * 60 * 1000


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (SELENIUM_BROWSER_NAME)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("selenium.server_url", "http://localhost:4444")
        'http://grid.example.com:4444'  # From YAML or env var

    Environment Variable Mapping:
        - selenium.server_url -> SELENIUM_SERVER_URL
        - selenium.browser_name -> SELENIUM_BROWSER_NAME
        - selenium.request_timeout_ms -> SELENIUM_REQUEST_TIMEOUT_MS
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton pattern - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "selenium.server_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class SessionConfig:
    """Resolved, read-only settings for the session lifecycle."""

    server_url: str
    browser_name: str
    hub_path: str = DEFAULT_HUB_PATH
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.server_url:
            raise ConfigurationError("selenium.server_url is not configured")
        if not self.browser_name:
            raise ConfigurationError("selenium.browser_name is not configured")
        if self.connect_timeout_ms <= 0 or self.request_timeout_ms <= 0:
            raise ConfigurationError(
                f"Timeouts must be positive (connect={self.connect_timeout_ms}, "
                f"request={self.request_timeout_ms})"
            )
        object.__setattr__(self, "browser_name", BrowserType.normalize(self.browser_name))

    @property
    def hub_url(self) -> str:
        """Server URL joined with the hub path."""
        if not self.hub_path:
            return self.server_url.rstrip("/")
        return f"{self.server_url.rstrip('/')}/{self.hub_path.lstrip('/')}"

    def with_overrides(self, **overrides: Any) -> "SessionConfig":
        """Copy with the non-empty overrides applied (e.g. pytest CLI options)."""
        values = {k: v for k, v in overrides.items() if v not in (None, "")}
        return replace(self, **values) if values else self

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> "SessionConfig":
        """
        Build SessionConfig from the YAML/env configuration.

        Raises:
            ConfigurationError: server URL or browser name missing
        """
        loader = loader or ConfigLoader()
        return cls(
            server_url=loader.get("selenium.server_url", ""),
            browser_name=loader.get("selenium.browser_name", ""),
            hub_path=loader.get("selenium.hub_path", DEFAULT_HUB_PATH),
            connect_timeout_ms=int(loader.get("selenium.connect_timeout_ms", DEFAULT_CONNECT_TIMEOUT_MS)),
            request_timeout_ms=int(loader.get("selenium.request_timeout_ms", DEFAULT_REQUEST_TIMEOUT_MS)),
        )


__all__ = [
    "ConfigLoader",
    "SessionConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONNECT_TIMEOUT_MS",
    "DEFAULT_REQUEST_TIMEOUT_MS",
]
