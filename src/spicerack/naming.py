"""Spice name normalization helpers."""

from __future__ import annotations

import unicodedata
from typing import Optional

ALPHABET = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

KNOWN_ABBREVIATIONS = frozenset({"BBQ", "MSG", "CBD"})
LOWERCASE_CONNECTORS = frozenset({"and", "or", "the", "in", "of", "with", "for"})


def _capitalize_word(word: str, index: int) -> str:
    if word.upper() in KNOWN_ABBREVIATIONS:
        return word.upper()
    if index > 0 and word.lower() in LOWERCASE_CONNECTORS:
        return word.lower()
    return word[:1].upper() + word[1:].lower()


def properly_capitalize_name(name: Optional[str]) -> str:
    """Title-case a spice name.

    Whitespace is trimmed and collapsed. Known abbreviations stay upper case and
    connector words are lower-cased unless they open the name::

        >>> properly_capitalize_name("  bbq   seasoning ")
        'BBQ Seasoning'
        >>> properly_capitalize_name("herbs of provence")
        'Herbs of Provence'
    """
    if not name:
        return ""
    return " ".join(_capitalize_word(word, index) for index, word in enumerate(name.split()))


def bucket_key(name: str) -> Optional[str]:
    """Return the shelf letter for ``name``: its first A-Z letter, accents folded."""
    folded = unicodedata.normalize("NFKD", name).upper()
    for char in folded:
        if char in ALPHABET:
            return char
    return None


__all__ = [
    "ALPHABET",
    "KNOWN_ABBREVIATIONS",
    "LOWERCASE_CONNECTORS",
    "bucket_key",
    "properly_capitalize_name",
]
