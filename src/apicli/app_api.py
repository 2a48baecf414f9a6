"""Main API facade for apicli.

This module provides the primary interface used by the CLI and by library
callers. All high-level operations flow through these functions.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import requests
import structlog

from .catalog import find_catalog_file, get_apis as _load_apis
from .config import AppConfig, load_config
from .domain.entities import ApiDescriptor, RequestDescriptor
from .engine.request_builder import RequestBuilder
from .services.query import run_jq
from .services.transport import send
from .templating.resolver import VariableResolver

logger = structlog.get_logger()

PathLike = Union[str, Path]


class ApiResult:
    """Response text of one call, with JSON and jq accessors."""

    def __init__(self, text: str, config: Optional[AppConfig] = None):
        self._text = text
        self._config = config or AppConfig()

    def json(self, query: Optional[str] = None) -> Any:
        """Decoded body, or jq output text when ``query`` is given.

        Raises:
            json.JSONDecodeError: If the body is not JSON and no query is given
            QueryError: If jq fails
        """
        if not query:
            return json.loads(self._text)
        return run_jq(
            query,
            self._text,
            executable=self._config.jq_executable,
            max_buffer=self._config.jq_max_buffer,
        )

    def text(self) -> str:
        return self._text


def _builder(config: Optional[AppConfig], environ: Optional[Mapping[str, str]] = None) -> RequestBuilder:
    config = config or load_config()
    return RequestBuilder(config, VariableResolver(environ, config.aliases))


def get_apis(config_path: Optional[PathLike] = None, config: Optional[AppConfig] = None) -> List[ApiDescriptor]:
    """Load every catalog entry.

    Args:
        config_path: Explicit catalog file; defaults to the first existing of
            ``apicli.toml`` and ``apis.txt`` in the configuration directory
        config: Package settings

    Returns:
        Entries in file order; empty when no catalog exists
    """
    return _load_apis(config_path, config or load_config())


def get_catalog_path(config_path: Optional[PathLike] = None, config: Optional[AppConfig] = None) -> Optional[Path]:
    """Catalog file that would be loaded, or None."""
    return find_catalog_file(config_path, config or load_config())


def get_api(
    service: str,
    name: str,
    config_path: Optional[PathLike] = None,
    config: Optional[AppConfig] = None,
) -> Optional[ApiDescriptor]:
    """First catalog entry matching ``(service, name)``, or None."""
    return _builder(config).get_api(service, name, config_path)


def get_request(
    service: str,
    name: str,
    overrides: Optional[Mapping[str, Any]] = None,
    config_path: Optional[PathLike] = None,
    config: Optional[AppConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Resolve one catalog entry into a request without sending it.

    Raises:
        UnknownApiError: If no entry matches
        RequiredVariableError: If a required placeholder is unresolved
    """
    return _builder(config, environ).get_request(service, name, overrides, config_path)


def fetch_api(
    service: str,
    name: str,
    vars: Optional[Mapping[str, Any]] = None,
    *,
    config_path: Optional[PathLike] = None,
    debug: bool = False,
    session: Optional[requests.Session] = None,
    config: Optional[AppConfig] = None,
    **extra: Any,
) -> requests.Response:
    """Resolve and send one request.

    Extra keyword arguments are merged over ``vars`` as variable overrides.
    The response is returned as received, whatever its status.
    """
    config = config or load_config()
    overrides: Dict[str, Any] = {**(vars or {}), **extra}
    request = get_request(service, name, overrides, config_path, config)
    return send(request, session=session, timeout=config.request_timeout, debug=debug)


def get(api_id: str, **opts: Any) -> ApiResult:
    """Call ``service.name`` and capture the response text.

    Accepts the same keyword arguments as :func:`fetch_api`.
    """
    service, _, rest = api_id.partition(".")
    name = rest.split(".")[0]
    config = opts.pop("config", None) or load_config()
    logger.debug("Calling API", api=api_id)
    response = fetch_api(service, name, config=config, **opts)
    return ApiResult(response.text, config)
