"""Error definitions for the apicli package."""

from __future__ import annotations
from typing import Dict, Optional


class ApiCliError(Exception):
    """Base exception for all apicli errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(ApiCliError):
    """Package settings errors."""
    pass


class CatalogError(ApiCliError):
    """Catalog file could not be located, read or interpreted."""
    pass


class UnknownApiError(CatalogError):
    """No catalog entry matches the requested service and name."""

    def __init__(self, service: str, name: str):
        super().__init__(
            f"Unknown API: {service}.{name}",
            {"service": service, "name": name},
        )
        self.service = service
        self.name = name


class TemplateError(ApiCliError):
    """Template substitution errors."""
    pass


class RequiredVariableError(TemplateError):
    """A ``$!NAME`` placeholder could not be resolved."""

    def __init__(self, variable: str):
        super().__init__(f"Variable {variable} is required", {"variable": variable})
        self.variable = variable


class QueryError(ApiCliError):
    """The external jq process failed."""
    pass
