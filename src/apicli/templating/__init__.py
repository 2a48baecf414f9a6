"""Variable substitution for catalog templates."""

from .resolver import PLACEHOLDER_PATTERN, VariableResolver
from .walker import walk

__all__ = ["PLACEHOLDER_PATTERN", "VariableResolver", "walk"]
