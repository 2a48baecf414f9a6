"""Services around resolved requests: transport and jq queries."""

from .query import run_jq
from .transport import send

__all__ = ["run_jq", "send"]
