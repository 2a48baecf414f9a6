"""Base catalog classes and interfaces."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union, TYPE_CHECKING
from pathlib import Path

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..contracts.errors import CatalogError
from ..domain.entities import ApiDescriptor

if TYPE_CHECKING:
    from ..config.model import AppConfig

logger = structlog.get_logger()


class CatalogReader(ABC):
    """Abstract base for catalog file readers."""

    @abstractmethod
    def can_read(self, path: Path) -> bool:
        """Check if this reader can handle the given file."""
        pass

    @abstractmethod
    def read(self, path: Path) -> List[Dict[str, Any]]:
        """Read raw descriptor dictionaries from file."""
        pass


def default_readers() -> List[CatalogReader]:
    """TOML for ``.toml`` files, the tabular format for everything else."""
    from .loaders import TomlReader, TxtReader
    return [TomlReader(), TxtReader()]


def find_catalog_file(
    config_path: Optional[Union[str, Path]] = None,
    config: Optional["AppConfig"] = None,
) -> Optional[Path]:
    """Resolve the catalog file to load.

    Args:
        config_path: Explicit catalog path; returned as-is when given
        config: Settings providing the default locations

    Returns:
        Path of the catalog, or None when no default file exists
    """
    if config_path is not None:
        return Path(config_path)

    if config is None:
        from ..config.load import load_config
        config = load_config()

    for candidate in config.default_catalog_paths():
        if candidate.exists():
            return candidate
    return None


def load_catalog(path: Path, readers: Optional[Sequence[CatalogReader]] = None) -> List[ApiDescriptor]:
    """Read and validate every entry of a catalog file.

    Raises:
        CatalogError: If the file is missing or cannot be parsed
    """
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}", {"path": str(path)})

    reader = _find_reader(path, readers or default_readers())
    if reader is None:
        raise CatalogError(f"No reader for catalog file: {path}", {"path": str(path)})

    entries = reader.read(path)
    try:
        apis = [ApiDescriptor.model_validate(entry) for entry in entries]
    except PydanticValidationError as e:
        raise CatalogError(f"Invalid catalog entry in {path}: {e}", {"path": str(path)})
    logger.debug("Catalog loaded", path=str(path), entries=len(apis))
    return apis


def get_apis(
    config_path: Optional[Union[str, Path]] = None,
    config: Optional["AppConfig"] = None,
    readers: Optional[Sequence[CatalogReader]] = None,
) -> List[ApiDescriptor]:
    """Load the catalog from disk. Nothing is cached between calls.

    Returns an empty list when no explicit path is given and no default
    catalog file exists.
    """
    path = find_catalog_file(config_path, config)
    if path is None:
        logger.debug("No catalog file found")
        return []
    return load_catalog(path, readers)


def find_api(apis: Iterable[ApiDescriptor], service: str, name: str) -> Optional[ApiDescriptor]:
    """First entry matching ``(service, name)`` in load order."""
    for api in apis:
        if api.matches(service, name):
            return api
    return None


def _find_reader(path: Path, readers: Sequence[CatalogReader]) -> Optional[CatalogReader]:
    """Find a compatible reader for the given file."""
    for reader in readers:
        if reader.can_read(path):
            return reader
    return None
