"""Inventory store owning the jar entries of one organizer session."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from uuid import uuid4

from spicerack.errors import InvalidNameError, NotFoundError
from spicerack.models.inventory import InventoryEntry
from spicerack.naming import ALPHABET, bucket_key, properly_capitalize_name

logger = logging.getLogger(__name__)

BucketCounts = Dict[str, int]
NameNormalizer = Callable[[str], str]


def empty_counts() -> BucketCounts:
    """Return a zero-filled count for every letter of the alphabet."""
    return {letter: 0 for letter in ALPHABET}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InventoryStore:
    """Ordered collection of jars added by the user.

    Bucket counts and totals are never stored; they are derived from the entry
    list whenever they are requested.
    """

    def __init__(
        self,
        entries: Iterable[InventoryEntry] = (),
        *,
        normalizer: NameNormalizer = properly_capitalize_name,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._entries: List[InventoryEntry] = list(entries)
        self._normalizer = normalizer
        self._clock = clock

    @property
    def entries(self) -> Tuple[InventoryEntry, ...]:
        return tuple(self._entries)

    @property
    def total_jars(self) -> int:
        return len(self._entries)

    @property
    def letter_counts(self) -> BucketCounts:
        return self.effective_counts(ignore_duplicates=False)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, name: str) -> InventoryEntry:
        """Normalize ``name`` and append a new jar for it."""

        normalized = self._normalizer(name or "")
        if not normalized:
            raise InvalidNameError(name)
        category = bucket_key(normalized)
        if category is None:
            raise InvalidNameError(name, "name contains no letter to shelve it under")

        entry = InventoryEntry(
            id=uuid4().hex,
            name=normalized,
            category=category,
            added_at=self._clock(),
        )
        self._entries.append(entry)
        logger.debug("Added jar id=%s name=%s bucket=%s", entry.id, entry.name, category)
        return entry

    def get(self, entry_id: str) -> InventoryEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"Inventory entry {entry_id} not found")

    def remove(self, entry_id: str) -> bool:
        """Remove the jar with ``entry_id``; returns False when it does not exist."""

        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                logger.debug("Removed jar id=%s name=%s", entry.id, entry.name)
                return True
        return False

    def reset(self) -> None:
        self._entries = []

    def replace_entries(self, entries: Iterable[InventoryEntry]) -> None:
        """Swap in a full entry list, e.g. one restored from a snapshot."""

        self._entries = list(entries)

    def effective_counts(self, ignore_duplicates: bool = False) -> BucketCounts:
        """Count jars per letter.

        With ``ignore_duplicates`` each distinct name is counted once, which
        changes how letters are grouped without touching the inventory itself.
        """

        counts = empty_counts()
        seen: set[str] = set()
        for entry in self._entries:
            if ignore_duplicates:
                if entry.name in seen:
                    continue
                seen.add(entry.name)
            letter = self._bucket_for(entry)
            if letter is not None:
                counts[letter] += 1
        return counts

    @staticmethod
    def _bucket_for(entry: InventoryEntry) -> Optional[str]:
        if entry.category in ALPHABET:
            return entry.category
        return bucket_key(entry.name)
