"""Pydantic models defining shared data contracts."""

from spicerack.models.inventory import InventoryEntry, InventorySnapshot
from spicerack.models.shelf import Shelf, ShelfInfo
from spicerack.models.spice import RankedSpice, Spice, SpiceSubmission, SubmissionStatus

__all__ = [
    "InventoryEntry",
    "InventorySnapshot",
    "RankedSpice",
    "Shelf",
    "ShelfInfo",
    "Spice",
    "SpiceSubmission",
    "SubmissionStatus",
]
