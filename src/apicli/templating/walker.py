"""Shape-preserving substitution over nested template values."""

from __future__ import annotations
from typing import Any, Mapping, Optional

from ..domain.entities import TemplateValue
from .resolver import VariableResolver


def walk(
    value: TemplateValue,
    resolver: VariableResolver,
    overrides: Optional[Mapping[str, Any]] = None,
) -> TemplateValue:
    """Return a copy of ``value`` with every string leaf substituted.

    Lists and tuples become new lists, mappings become new dicts; numbers,
    booleans and None pass through.
    """
    if isinstance(value, str):
        return resolver.sub(value, overrides)
    if isinstance(value, (list, tuple)):
        return [walk(item, resolver, overrides) for item in value]
    if isinstance(value, Mapping):
        return {key: walk(item, resolver, overrides) for key, item in value.items()}
    return value
