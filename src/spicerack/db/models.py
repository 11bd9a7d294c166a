"""SQLAlchemy models representing spicerack persistence tables."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base class for spicerack ORM models."""


class InventorySnapshotORM(Base):
    """Saved organizer configuration for one user.

    Jar totals and per-letter counts are deliberately absent: they are derived
    from the entry rows when a snapshot is loaded.
    """

    __tablename__ = "inventory_snapshots"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    shelf_count: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    ignore_duplicates: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    entries: Mapped[List["InventoryEntryORM"]] = relationship(
        back_populates="snapshot",
        cascade="all, delete-orphan",
        order_by="InventoryEntryORM.position",
    )


class InventoryEntryORM(Base):
    """Single jar belonging to a saved snapshot, kept in insertion order."""

    __tablename__ = "inventory_entries"

    user_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("inventory_snapshots.user_id", ondelete="CASCADE"),
        primary_key=True,
    )
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(1), nullable=False)
    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    snapshot: Mapped[InventorySnapshotORM] = relationship(back_populates="entries")


class SpiceSubmissionORM(Base):
    """Custom spice proposed for the canonical catalog."""

    __tablename__ = "spice_submissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(1), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


__all__ = ["Base", "InventoryEntryORM", "InventorySnapshotORM", "SpiceSubmissionORM"]
