"""Spice organizer facade used by the API server and the CLI.

``SpiceOrganizer`` wires the catalog, the inventory store, the shelf
distribution engine and fuzzy search together for a single user session. It
keeps no derived state: letter counts, totals and shelves are recomputed from
the current entries on every call.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Tuple

from spicerack.catalog import load_catalog, matches_catalog_name
from spicerack.config import get_settings
from spicerack.errors import InvalidNameError
from spicerack.inventory import BucketCounts, InventoryStore
from spicerack.models.inventory import InventoryEntry, InventorySnapshot
from spicerack.models.shelf import Shelf, ShelfInfo
from spicerack.models.spice import RankedSpice, Spice
from spicerack.naming import bucket_key, properly_capitalize_name
from spicerack.search import fuzzy_search
from spicerack.shelving import clamp_shelf_count, distribute, shelf_infos

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Persistence collaborator for organizer snapshots."""

    def save(self, snapshot: InventorySnapshot) -> bool: ...

    def load(self) -> Optional[InventorySnapshot]: ...

    def clear(self) -> bool: ...


class SpiceOrganizer:
    """Single-session spice organizer."""

    def __init__(
        self,
        spices: Iterable[Spice] = (),
        *,
        num_shelves: Optional[int] = None,
        ignore_duplicates: bool = False,
        store: Optional[InventoryStore] = None,
    ) -> None:
        settings = get_settings()
        self._default_shelves = settings.default_shelf_count
        self._search_limit = settings.search_limit
        self._spices: List[Spice] = list(spices)
        self._store = store or InventoryStore()
        self._num_shelves = clamp_shelf_count(
            self._default_shelves if num_shelves is None else num_shelves
        )
        self._ignore_duplicates = ignore_duplicates
        self._last_updated: Optional[datetime] = None

    # --- Catalog ---------------------------------------------------------

    @property
    def spices(self) -> List[Spice]:
        return list(self._spices)

    def set_spices(self, spices: Iterable[Spice]) -> None:
        self._spices = list(spices)

    def load_catalog(self, path: Optional[Path] = None) -> int:
        """Replace the search candidates with the catalog file contents."""

        self._spices = load_catalog(path)
        return len(self._spices)

    def spice_exists_in_list(self, name: str) -> bool:
        normalized = properly_capitalize_name(name)
        if not normalized:
            return False
        return any(matches_catalog_name(spice.name, normalized) for spice in self._spices)

    @staticmethod
    def create_custom_spice(term: str) -> Spice:
        """Turn a free-text search term into a spice that can be added or submitted."""

        name = properly_capitalize_name(term)
        if not name:
            raise InvalidNameError(term)
        category = bucket_key(name)
        if category is None:
            raise InvalidNameError(term, "name contains no letter to shelve it under")
        return Spice(name=name, category=category)

    def fuzzy_search(self, query: str, limit: Optional[int] = None) -> List[RankedSpice]:
        return fuzzy_search(query, self._spices, self._search_limit if limit is None else limit)

    # --- Inventory -------------------------------------------------------

    @property
    def inventory(self) -> Tuple[InventoryEntry, ...]:
        return self._store.entries

    @property
    def letter_counts(self) -> BucketCounts:
        return self._store.letter_counts

    @property
    def effective_letter_counts(self) -> BucketCounts:
        return self._store.effective_counts(self._ignore_duplicates)

    @property
    def total_jars(self) -> int:
        return self._store.total_jars

    def add_spice(self, name: str) -> InventoryEntry:
        return self._store.add(name)

    def remove_spice(self, entry_id: str) -> bool:
        return self._store.remove(entry_id)

    def reset_inventory(self) -> None:
        self._store.reset()

    # --- Configuration ---------------------------------------------------

    @property
    def num_shelves(self) -> int:
        return self._num_shelves

    @num_shelves.setter
    def num_shelves(self, value: int) -> None:
        self._num_shelves = clamp_shelf_count(value)

    @property
    def ignore_duplicates(self) -> bool:
        return self._ignore_duplicates

    @ignore_duplicates.setter
    def ignore_duplicates(self, value: bool) -> None:
        self._ignore_duplicates = bool(value)

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._last_updated

    # --- Shelves ---------------------------------------------------------

    def shelves(self) -> List[Shelf]:
        return distribute(self.effective_letter_counts, self._num_shelves)

    def calculate_optimal_distribution(self) -> List[List[str]]:
        """Letters per shelf, in shelf order."""

        return [list(shelf.letters) for shelf in self.shelves()]

    def calculate_items_per_shelf(self) -> List[ShelfInfo]:
        counts = self.effective_letter_counts
        return shelf_infos(distribute(counts, self._num_shelves), counts)

    # --- Persistence -----------------------------------------------------

    def snapshot(self) -> InventorySnapshot:
        return InventorySnapshot(
            entries=list(self._store.entries),
            shelf_count=self._num_shelves,
            ignore_duplicates=self._ignore_duplicates,
            last_updated=self._last_updated,
        )

    def restore(self, snapshot: InventorySnapshot) -> None:
        self._store.replace_entries(snapshot.entries)
        self._num_shelves = clamp_shelf_count(snapshot.shelf_count)
        self._ignore_duplicates = snapshot.ignore_duplicates
        self._last_updated = snapshot.last_updated

    def save_to(self, store: SnapshotStore) -> bool:
        """Persist the current state; failures are logged and reported as False."""

        now = datetime.now(timezone.utc)
        snapshot = self.snapshot().model_copy(update={"last_updated": now})
        try:
            saved = store.save(snapshot)
        except Exception:
            logger.exception("Failed to save organizer snapshot")
            return False
        if saved:
            self._last_updated = now
        return saved

    def load_from(self, store: SnapshotStore) -> bool:
        """Restore state from ``store``; False when nothing was saved or loading failed."""

        try:
            snapshot = store.load()
        except Exception:
            logger.exception("Failed to load organizer snapshot")
            return False
        if snapshot is None:
            return False
        self.restore(snapshot)
        return True

    def clear(self, store: Optional[SnapshotStore] = None) -> bool:
        """Forget the saved state and return to an empty inventory on default shelves."""

        cleared = True
        if store is not None:
            try:
                store.clear()
            except Exception:
                logger.exception("Failed to clear organizer snapshot")
                cleared = False
        self._store.reset()
        self._num_shelves = clamp_shelf_count(self._default_shelves)
        self._ignore_duplicates = False
        self._last_updated = None
        return cleared


__all__ = ["SnapshotStore", "SpiceOrganizer"]
