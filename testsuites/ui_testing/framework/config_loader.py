"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration for the We.Retail UI suites, with environment
variable override support.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with typed defaults
    - Singleton access with reset() for tests

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

# Built-in values used when neither YAML nor environment provide a key
DEFAULTS: Dict[str, Any] = {
    "ui": {
        "base_url": "http://localhost:4502",
        "browser": "chromium",
        "headless": True,
        "navigation_timeout": 30000,
        "assert_timeout": 5000,
        "viewport_width": 1920,
        "viewport_height": 1080,
    },
    "logging": {
        "level": "INFO",
    },
}


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Built-in DEFAULTS
        4. Default passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url")
        'http://localhost:4502'
        >>> config.get("ui.headless", True)
        True
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
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

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found anywhere

        Returns:
            Configuration value or default
        """
        builtin = _lookup(DEFAULTS, key)
        reference = default if default is not None else builtin

        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, reference)

        value = _lookup(self._config, key)
        if value is not None:
            return value
        if builtin is not None:
            return builtin
        return default

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section merged over the built-in defaults.

        Environment overrides are not applied here; use get() for single keys.
        """
        merged = dict(DEFAULTS.get(section, {}))
        merged.update(self._config.get(section, {}) or {})
        return merged

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


def _lookup(data: Dict[str, Any], key: str) -> Any:
    value: Any = data
    for part in key.split("."):
        if isinstance(value, dict):
            value = value.get(part)
        else:
            return None
        if value is None:
            return None
    return value


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
]
