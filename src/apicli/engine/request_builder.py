"""Turn a catalog entry into a concrete request."""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import structlog

from ..catalog.base import CatalogReader, find_api, get_apis
from ..config import constants
from ..config.model import AppConfig
from ..contracts.errors import CatalogError, UnknownApiError
from ..domain.entities import ApiDescriptor, RequestDescriptor
from ..templating.resolver import VariableResolver
from ..templating.walker import walk

logger = structlog.get_logger()


class RequestBuilder:
    """Resolve url, headers and body templates of catalog entries.

    The builder applies two conventions on top of plain substitution:

    - a headers value of the form ``"BEARER <expr>"`` expands to an
      ``Authorization`` / ``Content-Type`` pair
    - the body fragment ``, "provider": {"order": ["$PROVIDER"]}`` is kept
      with the provider filled in when PROVIDER resolves, and removed
      otherwise
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        resolver: Optional[VariableResolver] = None,
        readers: Optional[Sequence[CatalogReader]] = None,
    ):
        self.config = config or AppConfig()
        self.resolver = resolver or VariableResolver(aliases=self.config.aliases)
        self.readers = readers

    def get_api(
        self, service: str, name: str, config_path: Optional[Union[str, Path]] = None
    ) -> Optional[ApiDescriptor]:
        """First catalog entry matching ``(service, name)``, or None."""
        return find_api(get_apis(config_path, self.config, self.readers), service, name)

    def get_request(
        self,
        service: str,
        name: str,
        overrides: Optional[Mapping[str, Any]] = None,
        config_path: Optional[Union[str, Path]] = None,
    ) -> RequestDescriptor:
        """Load the catalog and resolve one entry.

        Raises:
            UnknownApiError: If no entry matches
            RequiredVariableError: If a required placeholder is unresolved
        """
        api = self.get_api(service, name, config_path)
        if api is None:
            raise UnknownApiError(service, name)
        return self.resolve(api, overrides)

    def resolve(self, api: ApiDescriptor, overrides: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
        """Resolve an already loaded entry. No I/O."""
        overrides = dict(overrides or {})
        provider = overrides.get(constants.PROVIDER_VARIABLE)
        if provider is None:
            provider = self.resolver.environ.get(constants.PROVIDER_VARIABLE)

        request = RequestDescriptor(
            url=self.resolver.sub(_as_text(api.url), overrides),
            method=_as_text(api.method),
            headers=self._resolve_headers(api, overrides),
            body=self._resolve_body(api.body, provider, overrides),
        )
        logger.debug("Request resolved", api=api.api_id, method=request.method, url=request.url)
        return request

    def _resolve_headers(self, api: ApiDescriptor, overrides: Mapping[str, Any]) -> Dict[str, Any]:
        headers = api.headers
        if isinstance(headers, str) and headers.startswith(constants.BEARER_PREFIX):
            token = self.resolver.sub(headers[len(constants.BEARER_PREFIX):].strip(), overrides)
            return {
                "Authorization": f"Bearer {token}",
                "Content-Type": constants.JSON_CONTENT_TYPE,
            }

        resolved = walk(headers, self.resolver, overrides)
        if resolved is None:
            return {}
        if not isinstance(resolved, dict):
            raise CatalogError(
                f"Headers of {api.api_id} must be a table or 'BEARER <token>'",
                {"service": api.service, "name": api.name},
            )
        return resolved

    def _resolve_body(self, body: Any, provider: Any, overrides: Mapping[str, Any]) -> Optional[str]:
        if body is None:
            return None
        if not isinstance(body, str):
            body = json.dumps(body)
        body = body.strip()

        snippet = constants.PROVIDER_ORDER_SNIPPET
        if provider:
            filled = snippet.replace(constants.PROVIDER_TOKEN, str(provider))
            body = body.replace(snippet, filled, 1)
        else:
            body = body.replace(snippet, "", 1)

        return self.resolver.sub(body, overrides)


def _as_text(value: Any) -> Optional[str]:
    """Render a raw catalog scalar as text, keeping None."""
    return None if value is None else str(value)
