"""Catalog entry and resolved request schemas using Pydantic."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Nested value found in catalog templates (headers tables, TOML bodies)
TemplateValue = Union[
    str, int, float, bool, None, List["TemplateValue"], Dict[str, "TemplateValue"]
]


class ApiDescriptor(BaseModel):
    """One catalog entry, prior to variable substitution.

    Every field is optional because tabular rows may omit trailing columns,
    and values are stored as written; a malformed entry only fails when it
    is resolved.
    Fields not listed here (extra TOML keys or extra columns) are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    service: Any = Field(None, description="Service identifier")
    name: Any = Field(None, description="API name within the service")
    url: Any = Field(None, description="URL template")
    method: Any = Field(None, description="HTTP verb")
    headers: Any = Field(None, description="'BEARER <expr>' shorthand or nested template")
    body: Any = Field(None, description="Body template, usually JSON-shaped text")

    @property
    def api_id(self) -> str:
        """Dotted ``service.name`` identifier."""
        return f"{self.service}.{self.name}"

    def matches(self, service: str, name: str) -> bool:
        return self.service == service and self.name == name


class RequestDescriptor(BaseModel):
    """Fully resolved request, ready for the transport."""

    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    method: Optional[str] = None
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[str] = None
