"""Core contracts and interfaces."""

from .errors import (
    ApiCliError,
    ConfigError,
    CatalogError,
    UnknownApiError,
    TemplateError,
    RequiredVariableError,
    QueryError,
)

__all__ = [
    "ApiCliError",
    "ConfigError",
    "CatalogError",
    "UnknownApiError",
    "TemplateError",
    "RequiredVariableError",
    "QueryError",
]
