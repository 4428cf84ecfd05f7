"""
================================================================================
Configuration Loader
================================================================================

Environment-selected YAML configuration with environment variable overrides.

Features:
    - One flat key/value file per environment (config/config-<env>.yaml)
    - Environment selection: explicit argument > ENV variable > "dev"
    - Environment variable override (UI_BASE_URL overrides baseUrl)
    - Typed accessors with documented defaults
    - Immutable result, built once and passed down explicitly

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml
from loguru import logger

from basesetup.exceptions import ConfigurationError


DEFAULT_ENV = "dev"

# Default configuration directory (repo root /config)
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# file key -> (attribute, default, environment override)
KNOWN_KEYS = {
    "browser": ("browser", "chromium", "UI_BROWSER"),
    "headless": ("headless", True, "UI_HEADLESS"),
    "slowMo": ("slow_mo", 0, "UI_SLOW_MO"),
    "defaultTimeout": ("default_timeout", 30000, "UI_DEFAULT_TIMEOUT"),
    "baseUrl": ("base_url", "https://example.com", "UI_BASE_URL"),
    "logLevel": ("log_level", "INFO", "UI_LOG_LEVEL"),
    "logFile": ("log_file", None, "UI_LOG_FILE"),
    "screenshotDir": ("screenshot_dir", "reports/screenshots", "UI_SCREENSHOT_DIR"),
}


def _convert_type(value: Any, reference: Any) -> Any:
    """
    Convert a raw value to match the type of the reference default.

    Used for environment variables (always strings) and loosely typed YAML.
    An empty value (YAML `key:` loads as None) falls back to the default.
    Booleans are checked before integers because bool is a subclass of int.
    """
    if value is None:
        return reference
    if reference is None:
        return value

    if isinstance(reference, bool):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ("true", "1", "yes", "on")
    if isinstance(reference, int):
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(
                f"⚠️ Invalid integer format: '{value}'. Using default: {reference}"
            )
            return reference
    if isinstance(reference, str):
        return str(value)

    return value


@dataclass(frozen=True)
class FrameworkConfig:
    """
    Immutable framework configuration.

    Attributes:
        env: Environment name the configuration was loaded for
        browser: Engine type - 'chromium', 'firefox', 'webkit'
        headless: Launch the browser without a window
        slow_mo: Delay (ms) applied to every driver operation
        default_timeout: Default per-operation timeout (ms) applied to new pages
        base_url: URL opened before every scenario
        log_level: Loguru level name
        log_file: Optional log file path
        screenshot_dir: Directory for saved screenshots
        properties: Read-only view of every raw key from the file
    """
    env: str = DEFAULT_ENV
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    default_timeout: int = 30000
    base_url: str = "https://example.com"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    screenshot_dir: str = "reports/screenshots"
    properties: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw property value or default."""
        return self.properties.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a property as bool ('true', '1', 'yes', 'on' are truthy)."""
        return _convert_type(self.properties.get(key, default), default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get a property as int, falling back to default when invalid."""
        return _convert_type(self.properties.get(key, default), default)


def resolve_env(env: Optional[str] = None) -> str:
    """
    Resolve the environment name.

    Priority: explicit argument (e.g. pytest --env), ENV variable, "dev".
    """
    if env:
        return env
    return os.environ.get("ENV") or DEFAULT_ENV


def config_path_for(env: str, config_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the configuration file path for an environment."""
    if config_dir is None:
        config_dir = os.environ.get("UI_CONFIG_DIR") or DEFAULT_CONFIG_DIR
    return Path(config_dir) / f"config-{env}.yaml"


def load_config(
    env: Optional[str] = None,
    config_dir: Optional[Union[str, Path]] = None,
) -> FrameworkConfig:
    """
    Load the configuration for an environment.

    Args:
        env: Environment name. Falls back to the ENV variable, then "dev".
        config_dir: Directory holding config-<env>.yaml files.
                    Falls back to UI_CONFIG_DIR, then the repo config/ dir.

    Returns:
        Immutable FrameworkConfig

    Raises:
        ConfigurationError: Missing file, invalid YAML or unsupported browser
    """
    env = resolve_env(env)
    path = config_path_for(env, config_dir)

    if not path.exists():
        logger.error(f"❌ Failed to load config file: {path}")
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain key/value pairs, "
            f"got {type(raw).__name__}"
        )

    values = {"env": env}
    for key, (attr, default, env_key) in KNOWN_KEYS.items():
        value = raw.get(key, default)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            value = env_value
        values[attr] = _convert_type(value, default)

    browser = str(values["browser"]).lower()
    if browser not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Unsupported browser: {values['browser']} "
            f"(expected one of {', '.join(SUPPORTED_BROWSERS)})"
        )
    values["browser"] = browser

    config = FrameworkConfig(properties=MappingProxyType(dict(raw)), **values)
    logger.info(f"✅ Loaded environment configuration: {path}")
    return config


__all__ = [
    "FrameworkConfig",
    "load_config",
    "resolve_env",
    "config_path_for",
    "DEFAULT_ENV",
    "SUPPORTED_BROWSERS",
]
