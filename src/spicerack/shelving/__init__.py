"""Shelf distribution engine."""

from __future__ import annotations

from .partition import MAX_SHELVES, clamp_shelf_count, distribute, linear_partition, shelf_infos

__all__ = ["MAX_SHELVES", "clamp_shelf_count", "distribute", "linear_partition", "shelf_infos"]
