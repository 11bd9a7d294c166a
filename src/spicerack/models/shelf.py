"""Shelf distribution models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Shelf(BaseModel):
    """Contiguous run of letters assigned to one shelf, plus its display label."""

    letters: tuple[str, ...]
    range_label: str

    model_config = ConfigDict(frozen=True)


class ShelfInfo(BaseModel):
    """Display projection of a shelf: its label and how many jars it holds."""

    range: str
    count: int

    model_config = ConfigDict(frozen=True)


__all__ = ["Shelf", "ShelfInfo"]
