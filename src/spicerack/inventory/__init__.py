"""In-memory inventory bookkeeping."""

from __future__ import annotations

from .store import BucketCounts, InventoryStore, empty_counts

__all__ = ["BucketCounts", "InventoryStore", "empty_counts"]
