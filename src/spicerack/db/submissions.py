"""Data access helpers for custom spice submissions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select

from spicerack.errors import NotFoundError
from spicerack.models.spice import SpiceSubmission, SubmissionStatus

from .models import SpiceSubmissionORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_model(row: SpiceSubmissionORM) -> SpiceSubmission:
    return SpiceSubmission(
        name=row.name,
        category=row.category,
        status=row.status,
        submitted_at=_as_utc(row.submitted_at),
        approved_at=_as_utc(row.approved_at),
    )


def record_submission(name: str, category: str, status: SubmissionStatus = "pending") -> SpiceSubmission:
    """Create or refresh the submission for ``name``."""

    now = datetime.now(timezone.utc)
    with session_scope() as session:
        row = session.execute(
            select(SpiceSubmissionORM).where(SpiceSubmissionORM.name == name)
        ).scalar_one_or_none()
        if row is None:
            row = SpiceSubmissionORM(name=name)
            session.add(row)
        row.category = category
        row.status = status
        row.submitted_at = now
        row.approved_at = now if status == "approved" else None
        session.flush()
        submission = _to_model(row)

    logger.info("Recorded submission name=%s category=%s status=%s", name, category, status)
    return submission


def list_submissions() -> List[SpiceSubmission]:
    with session_scope() as session:
        rows = (
            session.execute(select(SpiceSubmissionORM).order_by(SpiceSubmissionORM.id))
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def approve_submission(name: str) -> SpiceSubmission:
    with session_scope() as session:
        row = session.execute(
            select(SpiceSubmissionORM).where(SpiceSubmissionORM.name == name)
        ).scalar_one_or_none()
        if row is None:
            raise NotFoundError(f"Submission {name!r} not found")
        row.status = "approved"
        row.approved_at = datetime.now(timezone.utc)
        session.flush()
        return _to_model(row)


__all__ = ["approve_submission", "list_submissions", "record_submission"]
