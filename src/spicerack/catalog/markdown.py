"""Reading and editing the markdown spice catalog.

The catalog is a markdown document with YAML-style front matter followed by
single-letter section headings, one spice per line::

    ---
    title: Spice List
    ---

    A
    Allspice
    Anise
"""

from __future__ import annotations

import re
from typing import List

from spicerack.models.spice import Spice

_FRONT_MATTER_MARKER = "---"
_CATEGORY_LINE = re.compile(r"^[A-Z]$")


def _data_start(lines: List[str]) -> int:
    markers = 0
    for index, line in enumerate(lines):
        if line.strip() == _FRONT_MATTER_MARKER:
            markers += 1
            if markers == 2:
                return index + 1
    return 0


def parse_spice_list(text: str) -> List[Spice]:
    """Parse catalog text into spices tagged with their section letter."""

    lines = text.splitlines()
    category = ""
    spices: List[Spice] = []
    for raw_line in lines[_data_start(lines) :]:
        line = raw_line.strip()
        if not line or line.startswith("#") or line.startswith(_FRONT_MATTER_MARKER):
            continue
        if _CATEGORY_LINE.match(line):
            category = line
            continue
        spices.append(Spice(name=line, category=category))
    return spices


def matches_catalog_name(catalog_name: str, name: str) -> bool:
    """Exact catalog match, also accepting comma-qualified variants such as ``Pepper, Black``."""

    catalog_name = catalog_name.strip()
    return catalog_name == name or catalog_name.startswith(f"{name},")


def contains_spice(text: str, name: str) -> bool:
    return any(matches_catalog_name(line, name) for line in text.splitlines())


def insert_spice(text: str, name: str, category: str) -> str:
    """Return ``text`` with ``name`` added directly under its category heading.

    A new section is appended at the end when the heading does not exist yet.
    """
    letter = category.strip().upper()
    heading = re.compile(rf"^{re.escape(letter)}[ \t]*$", re.MULTILINE)
    match = heading.search(text)
    if match is None:
        return f"{text}\n\n{letter}\n{name}"
    insert_at = match.end()
    return f"{text[:insert_at]}\n{name}{text[insert_at:]}"


__all__ = ["contains_spice", "insert_spice", "matches_catalog_name", "parse_spice_list"]
