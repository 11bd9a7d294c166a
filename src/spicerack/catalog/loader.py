"""Catalog file access: loading the canonical list and accepting submissions."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import List, Literal, Optional

from spicerack.config import get_settings
from spicerack.errors import InvalidNameError
from spicerack.models.spice import Spice
from spicerack.naming import ALPHABET, bucket_key, properly_capitalize_name

from .markdown import contains_spice, insert_spice, parse_spice_list

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_RESOURCE = "spicelist.md"

SubmitOutcome = Literal["approved", "exists"]


def catalog_file(path: Optional[Path] = None) -> Path:
    """Location of the editable catalog; submissions are written here."""

    settings = get_settings()
    return path or settings.catalog_path or settings.database_path.parent / DEFAULT_CATALOG_RESOURCE


def read_catalog_text(path: Optional[Path] = None) -> str:
    """Return the raw catalog markdown from ``path``, the settings, or the bundled list."""

    target = catalog_file(path)
    if target.exists():
        return target.read_text(encoding="utf-8")
    logger.debug("Catalog %s not found; using bundled spice list", target)
    return (
        resources.files("spicerack.catalog.data")
        .joinpath(DEFAULT_CATALOG_RESOURCE)
        .read_text(encoding="utf-8")
    )


def load_catalog(path: Optional[Path] = None) -> List[Spice]:
    spices = parse_spice_list(read_catalog_text(path))
    logger.debug("Loaded %s catalog spice(s)", len(spices))
    return spices


def submit_spice(name: str, category: Optional[str] = None, path: Optional[Path] = None) -> SubmitOutcome:
    """Add a custom spice to the catalog file, auto-approving it.

    Returns ``"exists"`` without touching the file when the catalog already lists
    the spice. The first submission against the bundled list writes an edited
    copy to :func:`catalog_file`.
    """
    normalized = properly_capitalize_name(name)
    if not normalized:
        raise InvalidNameError(name)
    letter = (category or "").strip().upper()[:1]
    if letter not in ALPHABET:
        letter = bucket_key(normalized)
    if letter is None:
        raise InvalidNameError(name, "name contains no letter to file it under")

    text = read_catalog_text(path)
    if contains_spice(text, normalized):
        logger.info("Catalog already lists %s", normalized)
        return "exists"

    target = catalog_file(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(insert_spice(text, normalized, letter), encoding="utf-8")
    logger.info("Added %s to catalog section %s at %s", normalized, letter, target)
    return "approved"


__all__ = ["DEFAULT_CATALOG_RESOURCE", "catalog_file", "load_catalog", "read_catalog_text", "submit_spice"]
