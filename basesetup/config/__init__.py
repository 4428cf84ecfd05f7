"""Environment-selected configuration."""

from .config_loader import (
    DEFAULT_ENV,
    SUPPORTED_BROWSERS,
    FrameworkConfig,
    config_path_for,
    load_config,
    resolve_env,
)
from basesetup.exceptions import ConfigurationError

__all__ = [
    "FrameworkConfig",
    "ConfigurationError",
    "load_config",
    "resolve_env",
    "config_path_for",
    "DEFAULT_ENV",
    "SUPPORTED_BROWSERS",
]
