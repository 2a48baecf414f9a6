"""Placeholder substitution for catalog templates.

Grammar, scanned left to right without overlap:

- ``$$`` emits a literal ``$``
- ``$NAME`` substitutes the value of NAME, or nothing when unresolved
- ``$!NAME`` substitutes the value of NAME and fails when unresolved

A name is looked up in the caller's overrides first, then the environment.
When neither has it and the name is a key of the alias table, each alias is
tried the same way in order.
"""

from __future__ import annotations
import os
import re
from typing import Any, Mapping, Optional, Sequence

from ..config import constants
from ..contracts.errors import RequiredVariableError

PLACEHOLDER_PATTERN = re.compile(r"(\$\$)|(\$!?)([A-Za-z_]\w*)", re.ASCII)


class VariableResolver:
    """Resolve placeholders against overrides, an environment and aliases."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        aliases: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        """Initialize resolver.

        Args:
            environ: Environment lookup (defaults to the live ``os.environ``)
            aliases: Canonical name -> ordered fallback names
        """
        self.environ = os.environ if environ is None else environ
        self.aliases = constants.DEFAULT_ALIASES if aliases is None else aliases

    def lookup(self, name: str, overrides: Optional[Mapping[str, Any]] = None) -> Any:
        """Value of ``name``, following aliases; None when unresolved."""
        overrides = overrides or {}
        value = self._direct(name, overrides)
        if value is None:
            for alias in self.aliases.get(name, ()):
                value = self._direct(alias, overrides)
                if value is not None:
                    break
        return value

    def sub(self, template: Any, overrides: Optional[Mapping[str, Any]] = None) -> Any:
        """Substitute every placeholder in ``template``.

        Non-string values are returned unchanged.

        Raises:
            RequiredVariableError: If a ``$!NAME`` placeholder is unresolved
        """
        if not isinstance(template, str):
            return template

        def replace(match: "re.Match[str]") -> str:
            escape, marker, name = match.groups()
            if escape:
                return "$"
            value = self.lookup(name, overrides)
            if value is None:
                if "!" in marker:
                    raise RequiredVariableError(name)
                return ""
            return _as_text(value)

        return PLACEHOLDER_PATTERN.sub(replace, template)

    def _direct(self, name: str, overrides: Mapping[str, Any]) -> Any:
        value = overrides.get(name)
        if value is None:
            value = self.environ.get(name)
        return value


def _as_text(value: Any) -> str:
    # JSON spelling for booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
