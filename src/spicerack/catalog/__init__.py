"""Canonical spice catalog provider."""

from __future__ import annotations

from .loader import DEFAULT_CATALOG_RESOURCE, catalog_file, load_catalog, read_catalog_text, submit_spice
from .markdown import contains_spice, insert_spice, matches_catalog_name, parse_spice_list

__all__ = [
    "DEFAULT_CATALOG_RESOURCE",
    "catalog_file",
    "contains_spice",
    "insert_spice",
    "load_catalog",
    "matches_catalog_name",
    "parse_spice_list",
    "read_catalog_text",
    "submit_spice",
]
