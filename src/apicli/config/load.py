"""Configuration loading utilities."""

from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Any, Mapping, Union, Optional

from pydantic import ValidationError as PydanticValidationError

from ..contracts.errors import ConfigError
from . import constants
from .model import AppConfig

# Settings that may not be supplied through the environment
_ENV_EXCLUDED_FIELDS = {"aliases"}


def default_config() -> AppConfig:
    """Create default configuration."""
    return AppConfig()


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load settings from file and environment.

    Args:
        path: Path to a settings file. If None, looks for:
              - APICLI_SETTINGS environment variable
              - settings.toml in the configuration directory
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Loaded and validated configuration

    Raises:
        ConfigError: If the settings file is invalid or not found
    """
    environ = os.environ if environ is None else environ

    if path is None:
        path = _find_config_file(environ)

    if path is None:
        config = default_config()
    else:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        try:
            config = AppConfig.from_toml_file(path)
        except Exception as e:
            raise ConfigError(f"Failed to load config from {path}: {e}", {"path": str(path)})

    return _apply_env_overrides(config, environ)


def _find_config_file(environ: Mapping[str, str]) -> Optional[Path]:
    """Find settings file using standard search paths."""

    # 1. Environment variable
    env_path = environ.get(constants.SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)

    # 2. Configuration directory (which may itself be overridden)
    config_dir = environ.get(f"{constants.ENV_PREFIX}CONFIG_DIR")
    base = Path(config_dir).expanduser() if config_dir else constants.DEFAULT_CONFIG_DIR
    user_config = base / constants.SETTINGS_FILE_NAME
    if user_config.exists():
        return user_config

    return None


def _apply_env_overrides(config: AppConfig, environ: Mapping[str, str]) -> AppConfig:
    """Apply environment variable overrides to configuration.

    Environment variables follow pattern: APICLI_<FIELD>
    Examples:
        APICLI_CONFIG_DIR=/etc/apicli
        APICLI_JQ_EXECUTABLE=gojq
        APICLI_REQUEST_TIMEOUT=30
    """
    overrides: Dict[str, Any] = {}
    fields = set(AppConfig.model_fields) - _ENV_EXCLUDED_FIELDS

    for key, value in environ.items():
        if not key.startswith(constants.ENV_PREFIX):
            continue
        field = key[len(constants.ENV_PREFIX):].lower()
        if field in fields:
            # pydantic coerces the raw strings to the field types
            overrides[field] = value

    if not overrides:
        return config

    config_dict = config.model_dump()
    config_dict.update(overrides)
    try:
        return AppConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid environment override: {e}", {"overrides": overrides})
