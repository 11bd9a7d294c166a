"""Per-user inventory snapshot persistence."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete

from spicerack.models.inventory import InventoryEntry, InventorySnapshot

from .models import InventoryEntryORM, InventorySnapshotORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_model(row: InventorySnapshotORM) -> InventorySnapshot:
    return InventorySnapshot(
        entries=[
            InventoryEntry(
                id=entry.id,
                name=entry.name,
                category=entry.category,
                added_at=_as_utc(entry.added_at),
            )
            for entry in row.entries
        ],
        shelf_count=row.shelf_count,
        ignore_duplicates=row.ignore_duplicates,
        last_updated=_as_utc(row.updated_at),
    )


def load_snapshot(user_id: str) -> Optional[InventorySnapshot]:
    """Return the saved snapshot for ``user_id``, or None when nothing was saved."""

    with session_scope() as session:
        row = session.get(InventorySnapshotORM, user_id)
        if row is None:
            return None
        snapshot = _to_model(row)

    logger.debug(
        "Loaded snapshot with %s entries",
        len(snapshot.entries),
        extra={"user_id": user_id},
    )
    return snapshot


def save_snapshot(user_id: str, snapshot: InventorySnapshot) -> InventorySnapshot:
    """Replace the stored snapshot for ``user_id`` and return it as persisted."""

    updated_at = snapshot.last_updated or datetime.now(timezone.utc)
    with session_scope() as session:
        row = session.get(InventorySnapshotORM, user_id)
        if row is None:
            row = InventorySnapshotORM(user_id=user_id)
            session.add(row)
        row.shelf_count = snapshot.shelf_count
        row.ignore_duplicates = snapshot.ignore_duplicates
        row.updated_at = updated_at
        session.flush()

        session.execute(delete(InventoryEntryORM).where(InventoryEntryORM.user_id == user_id))
        for position, entry in enumerate(snapshot.entries):
            session.add(
                InventoryEntryORM(
                    user_id=user_id,
                    id=entry.id,
                    position=position,
                    name=entry.name,
                    category=entry.category,
                    added_at=entry.added_at,
                )
            )

    logger.info(
        "Saved snapshot with %s entries across %s shelves",
        len(snapshot.entries),
        snapshot.shelf_count,
        extra={"user_id": user_id, "shelf_count": snapshot.shelf_count},
    )
    stored = load_snapshot(user_id)
    assert stored is not None  # just written
    return stored


def delete_snapshot(user_id: str) -> bool:
    """Remove the snapshot for ``user_id``; False when there was none."""

    with session_scope() as session:
        row = session.get(InventorySnapshotORM, user_id)
        if row is None:
            return False
        session.delete(row)
    logger.info("Deleted snapshot", extra={"user_id": user_id})
    return True


class SqlSnapshotStore:
    """Snapshot store bound to one user, backed by the SQLite database."""

    def __init__(self, user_id: str):
        self.user_id = user_id

    def save(self, snapshot: InventorySnapshot) -> bool:
        save_snapshot(self.user_id, snapshot)
        return True

    def load(self) -> Optional[InventorySnapshot]:
        return load_snapshot(self.user_id)

    def clear(self) -> bool:
        return delete_snapshot(self.user_id)


__all__ = ["SqlSnapshotStore", "delete_snapshot", "load_snapshot", "save_snapshot"]
