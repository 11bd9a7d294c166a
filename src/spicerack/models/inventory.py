"""Inventory entry and persisted snapshot models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from spicerack.naming import ALPHABET, bucket_key


class InventoryEntry(BaseModel):
    """A single jar on the household's shelves."""

    id: str
    name: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=1)
    added_at: datetime = Field(validation_alias=AliasChoices("added_at", "addedAt"))

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any, info: ValidationInfo) -> Any:
        """Upper-case the shelf letter, or derive it from the name when it is not A-Z."""
        letter = value.strip().upper() if isinstance(value, str) else ""
        if letter in ALPHABET:
            return letter
        derived = bucket_key(info.data.get("name") or "")
        if derived is None:
            raise ValueError("entry has no A-Z letter to shelve it under")
        return derived


class InventorySnapshot(BaseModel):
    """Persisted organizer state.

    Only the entries and the user's configuration are stored. Letter counts and
    jar totals are always recomputed from ``entries`` after loading, so any such
    keys found in a payload are ignored.
    """

    entries: list[InventoryEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("entries", "inventory"),
    )
    shelf_count: int = Field(default=3, validation_alias=AliasChoices("shelf_count", "numShelves"))
    ignore_duplicates: bool = Field(
        default=False,
        validation_alias=AliasChoices("ignore_duplicates", "ignoreDuplicates"),
    )
    last_updated: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("last_updated", "lastUpdated"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("shelf_count", mode="before")
    @classmethod
    def clamp_shelf_count(cls, value: Any) -> Any:
        """Shelf counts below one are corrected rather than rejected."""
        if isinstance(value, int) and not isinstance(value, bool) and value < 1:
            return 1
        return value

    @model_validator(mode="after")
    def check_unique_entry_ids(self) -> "InventorySnapshot":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.id in seen:
                raise ValueError(f"duplicate inventory entry id {entry.id!r}")
            seen.add(entry.id)
        return self


__all__ = ["InventoryEntry", "InventorySnapshot"]
