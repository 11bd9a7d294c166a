"""Catalog and search result models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SubmissionStatus = Literal["pending", "approved", "rejected"]


class Spice(BaseModel):
    """Entry of the canonical spice catalog."""

    name: str
    category: str = Field(default="", max_length=1)

    model_config = ConfigDict(frozen=True)


class RankedSpice(Spice):
    """Catalog entry paired with its fuzzy-match relevance score."""

    score: float


class SpiceSubmission(BaseModel):
    """Custom spice proposed for inclusion in the canonical catalog."""

    name: str
    category: str
    status: SubmissionStatus = "pending"
    submitted_at: datetime
    approved_at: Optional[datetime] = Field(default=None)

    model_config = ConfigDict(frozen=True)


__all__ = ["RankedSpice", "Spice", "SpiceSubmission", "SubmissionStatus"]
