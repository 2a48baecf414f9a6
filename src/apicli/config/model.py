"""Configuration data models."""

from __future__ import annotations
from typing import Dict, List, Optional, Union
from pathlib import Path
from pydantic import BaseModel, Field, field_validator

from . import constants


class AppConfig(BaseModel):
    """Package settings for catalog lookup, templating and post-processing."""

    config_dir: Path = Field(
        default_factory=lambda: constants.DEFAULT_CONFIG_DIR,
        description="Directory holding the default catalog files",
    )
    jq_executable: str = Field(constants.JQ_EXECUTABLE, description="jq-compatible executable")
    jq_max_buffer: int = Field(constants.JQ_MAX_BUFFER, description="Maximum jq output in bytes")
    request_timeout: Optional[float] = Field(None, description="HTTP timeout in seconds")
    aliases: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in constants.DEFAULT_ALIASES.items()},
        description="Variable name -> ordered fallback names",
    )

    @field_validator("jq_max_buffer")
    @classmethod
    def validate_jq_max_buffer(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("jq_max_buffer must be positive")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("config_dir")
    @classmethod
    def expand_config_dir(cls, v: Path) -> Path:
        return Path(v).expanduser()

    def default_catalog_paths(self) -> List[Path]:
        """Default catalog files in lookup order."""
        return [
            self.config_dir / constants.TOML_CATALOG_NAME,
            self.config_dir / constants.TXT_CATALOG_NAME,
        ]

    @classmethod
    def from_toml_file(cls, path: Union[Path, str]) -> "AppConfig":
        """Load settings from the ``[settings]`` table of a TOML file."""
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data.get("settings", {}))
