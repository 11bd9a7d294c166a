"""Dependency definitions for the spicerack API server."""

from __future__ import annotations

from typing import Callable, List, Optional

from fastapi import Depends, HTTPException, Request, status

from spicerack.catalog import load_catalog, submit_spice
from spicerack.config import get_settings
from spicerack.db.snapshots import delete_snapshot, load_snapshot, save_snapshot
from spicerack.db.submissions import approve_submission, list_submissions, record_submission
from spicerack.models.inventory import InventorySnapshot
from spicerack.models.spice import Spice, SpiceSubmission, SubmissionStatus

CatalogProvider = Callable[[], List[Spice]]
CatalogSubmitter = Callable[[str, Optional[str]], str]
SubmissionRecorder = Callable[[str, str, SubmissionStatus], SpiceSubmission]
SubmissionListProvider = Callable[[], List[SpiceSubmission]]
SubmissionApprover = Callable[[str], SpiceSubmission]
SnapshotLoader = Callable[[str], Optional[InventorySnapshot]]
SnapshotSaver = Callable[[str, InventorySnapshot], InventorySnapshot]
SnapshotDeleter = Callable[[str], bool]


def get_catalog_provider() -> CatalogProvider:
    """Return the catalog provider implementation (the markdown spice list)."""

    return lambda: load_catalog()


def get_catalog_submitter() -> CatalogSubmitter:
    return lambda name, category: submit_spice(name, category)


def get_submission_recorder() -> SubmissionRecorder:
    return record_submission


def get_submission_list_provider() -> SubmissionListProvider:
    return list_submissions


def get_submission_approver() -> SubmissionApprover:
    return approve_submission


def get_snapshot_loader() -> SnapshotLoader:
    return load_snapshot


def get_snapshot_saver() -> SnapshotSaver:
    return save_snapshot


def get_snapshot_deleter() -> SnapshotDeleter:
    return delete_snapshot


def require_api_token(
    request: Request,
    settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
