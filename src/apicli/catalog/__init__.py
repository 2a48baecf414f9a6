"""Catalog system for API descriptors."""

from .base import CatalogReader, get_apis, find_api, find_catalog_file, load_catalog
from .loaders import TomlReader, TxtReader
from .txt_format import parse_txt, try_parse_json

__all__ = [
    "CatalogReader",
    "get_apis",
    "find_api",
    "find_catalog_file",
    "load_catalog",
    "TomlReader",
    "TxtReader",
    "parse_txt",
    "try_parse_json",
]
