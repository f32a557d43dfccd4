"""
================================================================================
Configuration Loader
================================================================================

YAML-based settings with environment variable override support.

Features:
    - Hierarchical YAML configuration loading
    - Environment variable override (APP_BASE_URL overrides app.base_url)
    - Dot notation path access with typed accessors
    - Built-in defaults when the file is missing
    - Read-only after construction; built once per process by load_settings()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger


# Default configuration file path (repo root / config / config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

# Environment variable that points at an alternative configuration file
CONFIG_PATH_ENV = "STOREFRONT_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "app": {
        "base_url": "https://www.saucedemo.com/",
    },
    "browser": {
        "name": "chrome",
        "headless": False,
    },
    "timeouts": {
        "implicit_wait": 10,
        "explicit_wait": 20,
        "page_load": 30,
        "query_wait": 2,
    },
    "credentials": {
        "standard_user": "standard_user",
        "locked_out_user": "locked_out_user",
        "problem_user": "problem_user",
        "performance_glitch_user": "performance_glitch_user",
        "password": "secret_sauce",
    },
    "screenshots": {
        "on_failure": True,
        "path": "screenshots/",
    },
    "reports": {
        "path": "reports/",
        "title": "Sauce Demo Test Automation Report",
    },
    "execution": {
        "parallel": True,
        "thread_count": 3,
    },
    "logging": {
        "level": "INFO",
        "file": "logs/automation.log",
    },
}


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class Settings:
    """
    Read-only configuration with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (APP_BASE_URL)
        2. YAML configuration file
        3. Built-in defaults

    Usage:
        >>> settings = Settings.from_file(Path("config/config.yaml"))
        >>> settings.get_str("app.base_url")
        'https://www.saucedemo.com/'
        >>> settings.get_int("timeouts.explicit_wait", 20)
        20

    Environment Variable Mapping:
        - app.base_url -> APP_BASE_URL
        - browser.headless -> BROWSER_HEADLESS
        - timeouts.explicit_wait -> TIMEOUTS_EXPLICIT_WAIT
    """

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        source: Optional[Path] = None,
    ) -> None:
        """
        Args:
            data: Nested configuration mapping (defaults used when None)
            environ: Environment mapping used for overrides (os.environ if None)
            source: File the data was read from, for diagnostics
        """
        self._data = copy.deepcopy(dict(data)) if data is not None else copy.deepcopy(DEFAULTS)
        self._environ = dict(os.environ if environ is None else environ)
        self.source = source

    @classmethod
    def from_file(
        cls,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """
        Load settings from a YAML file.

        A missing file yields the built-in defaults. File values are merged
        over the defaults so partial files are valid.

        Raises:
            ConfigurationError: If the file exists but is not valid YAML
        """
        config_path = Path(config_path or DEFAULT_CONFIG_PATH)

        if not config_path.exists():
            logger.warning(
                f"Configuration file not found: {config_path}. "
                f"Using defaults and environment variables only."
            )
            return cls(DEFAULTS, environ=environ)

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                file_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

        if not isinstance(file_data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(file_data).__name__}"
            )

        logger.debug(f"Loaded configuration from: {config_path}")
        return cls(_deep_merge(DEFAULTS, file_data), environ=environ, source=config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then the loaded data, then default.
        Environment values are converted to the type of the configured value
        (or of ``default`` when the key is not configured).

        Args:
            key: Dot-notation path (e.g., "app.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._lookup(key)

        env_value = self._environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            reference = value if value is not None else default
            return _convert_type(env_value, reference)

        return default if value is None else value

    def get_str(self, key: str, default: str = "") -> str:
        value = self.get(key, default)
        return default if value is None else str(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Config {key}={value!r} is not an integer, using {default}")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Config {key}={value!r} is not a number, using {default}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get a copy of an entire configuration section.

        Args:
            section: Section name (e.g., "credentials")

        Returns:
            Section dictionary or empty dict if not found
        """
        return copy.deepcopy(self._data.get(section, {}))

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self.get_str("app.base_url")

    @property
    def explicit_wait(self) -> float:
        return self.get_float("timeouts.explicit_wait", 20)

    @property
    def page_load_timeout(self) -> float:
        return self.get_float("timeouts.page_load", 30)

    @property
    def query_wait(self) -> float:
        return self.get_float("timeouts.query_wait", 2)

    def credential(self, user_key: str) -> str:
        """Return the configured username for a credential key such as ``standard_user``."""
        return self.get_str(f"credentials.{user_key}", user_key)

    @property
    def password(self) -> str:
        return self.get_str("credentials.password")

    def _lookup(self, key: str) -> Any:
        value: Any = self._data
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
            if value is None:
                return None
        return value

    def __repr__(self) -> str:
        return f"Settings(source={self.source})"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep merges two dictionaries, with override taking precedence."""
    result = copy.deepcopy(dict(base))
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _convert_type(value: str, reference: Any) -> Any:
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


_settings: Optional[Settings] = None


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Return the process-wide settings, loading them on first use.

    The path comes from ``config_path``, then ``STOREFRONT_CONFIG``, then
    DEFAULT_CONFIG_PATH. Later calls return the cached instance.
    """
    global _settings

    if _settings is None:
        path = config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
        _settings = Settings.from_file(Path(path))
    return _settings


def reset_settings() -> None:
    """
    Drop the cached settings.

    Useful for testing when configuration needs to be reloaded
    with different values.
    """
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULTS",
    "ConfigurationError",
    "Settings",
    "load_settings",
    "reset_settings",
]
