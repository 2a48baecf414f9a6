"""Catalog file loaders for different formats."""

from __future__ import annotations
from typing import Any, Dict, List
from pathlib import Path

from ..contracts.errors import CatalogError
from .base import CatalogReader
from .txt_format import parse_txt


class TomlReader(CatalogReader):
    """Reader for TOML catalog files.

    Entries live in the ``apis`` table under quoted dotted keys::

        [apis."httpbin.get"]
        url = "https://httpbin.org/get"
        method = "GET"
    """

    def can_read(self, path: Path) -> bool:
        """Check if file has .toml extension."""
        return path.suffix.lower() == ".toml"

    def read(self, path: Path) -> List[Dict[str, Any]]:
        """Read TOML file."""
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise CatalogError(f"Failed to parse catalog {path}: {e}", {"path": str(path)}) from e
        except OSError as e:
            raise CatalogError(f"Failed to read catalog {path}: {e}", {"path": str(path)}) from e

        apis = data.get("apis", {})
        if not isinstance(apis, dict):
            return []
        return [_toml_entry(api_id, fields) for api_id, fields in apis.items()]


class TxtReader(CatalogReader):
    """Reader for the tabular text format; accepts any file."""

    def can_read(self, path: Path) -> bool:
        return True

    def read(self, path: Path) -> List[Dict[str, Any]]:
        """Read tabular text file."""
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CatalogError(f"Failed to parse catalog {path}: {e}", {"path": str(path)}) from e
        except OSError as e:
            raise CatalogError(f"Failed to read catalog {path}: {e}", {"path": str(path)}) from e
        return parse_txt(content)


def _toml_entry(api_id: str, fields: Any) -> Dict[str, Any]:
    """Split ``service.name[.suffix]`` and merge the entry's own fields."""
    parts = api_id.split(".")
    entry: Dict[str, Any] = {"service": parts[0]}
    if len(parts) > 1:
        entry["name"] = parts[1]
    if isinstance(fields, dict):
        entry.update(fields)
    return entry
