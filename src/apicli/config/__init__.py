"""Settings model, loader and shared constants."""

from . import constants
from .constants import (
    DEFAULT_ALIASES,
    DEFAULT_CONFIG_DIR,
    JQ_EXECUTABLE,
    JQ_MAX_BUFFER,
    SETTINGS_FILE_NAME,
    TOML_CATALOG_NAME,
    TXT_CATALOG_NAME,
)
from .load import default_config, load_config
from .model import AppConfig

__all__ = [
    "AppConfig",
    "DEFAULT_ALIASES",
    "DEFAULT_CONFIG_DIR",
    "JQ_EXECUTABLE",
    "JQ_MAX_BUFFER",
    "SETTINGS_FILE_NAME",
    "TOML_CATALOG_NAME",
    "TXT_CATALOG_NAME",
    "constants",
    "default_config",
    "load_config",
]
