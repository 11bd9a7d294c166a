from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from spicerack.models.inventory import InventoryEntry, InventorySnapshot

ADDED = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "name, category, expected",
    [
        ("Cumin", "C", "C"),
        ("Cumin", " c ", "C"),
        ("Cumin", "1", "C"),
        ("Épazote", "", "E"),
    ],
)
def test_entry_category_is_an_uppercase_letter(name, category, expected):
    entry = InventoryEntry(id="1", name=name, category=category, added_at=ADDED)

    assert entry.category == expected


def test_entry_without_any_letter_is_rejected():
    with pytest.raises(ValidationError):
        InventoryEntry(id="1", name="123", category="1", added_at=ADDED)


def test_snapshot_rejects_duplicate_entry_ids():
    entry = InventoryEntry(id="1", name="Cumin", category="C", added_at=ADDED)

    with pytest.raises(ValidationError):
        InventorySnapshot(entries=[entry, entry])


def test_legacy_snapshot_categories_are_normalized():
    snapshot = InventorySnapshot.model_validate(
        {
            "inventory": [
                {"id": "1", "name": "Sage", "category": "s", "addedAt": "2024-01-01T00:00:00Z"},
                {"id": "2", "name": "Sumac", "category": "S", "addedAt": "2024-01-01T00:00:00Z"},
            ],
            "totalJars": 9,
        }
    )

    assert [entry.category for entry in snapshot.entries] == ["S", "S"]
