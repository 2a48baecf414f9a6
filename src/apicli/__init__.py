"""apicli - resolve and call HTTP APIs described in a local catalog."""

__version__ = "0.1.0"

from .app_api import ApiResult, fetch_api, get, get_api, get_apis, get_request
from .contracts.errors import (
    ApiCliError,
    CatalogError,
    ConfigError,
    QueryError,
    RequiredVariableError,
    UnknownApiError,
)

__all__ = [
    "__version__",
    "ApiResult",
    "fetch_api",
    "get",
    "get_api",
    "get_apis",
    "get_request",
    "ApiCliError",
    "CatalogError",
    "ConfigError",
    "QueryError",
    "RequiredVariableError",
    "UnknownApiError",
]
