"""ASGI application for spicerack."""
# mypy: ignore-errors

from __future__ import annotations

import logging
from datetime import datetime, timezone
from time import perf_counter
from typing import Literal, Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from spicerack import __version__, metrics
from spicerack.config import Settings, get_settings
from spicerack.errors import InvalidNameError, NotFoundError
from spicerack.logging_utils import configure_logging as configure_app_logging
from spicerack.models.inventory import InventorySnapshot
from spicerack.models.shelf import ShelfInfo
from spicerack.models.spice import RankedSpice, Spice, SpiceSubmission
from spicerack.naming import ALPHABET
from spicerack.organizer import SpiceOrganizer
from spicerack.search import fuzzy_search
from spicerack.server import deps

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Spicerack", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("spicerack.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details and record request metrics."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            method = request.method
            path = request.url.path
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(method=method, path=path, status=str(response.status_code)).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
            return response

    @application.get("/spices", response_model=list[Spice], summary="List the spice catalog")
    def spices_list(
        provider: deps.CatalogProvider = Depends(deps.get_catalog_provider),
    ) -> list[Spice]:
        return provider()

    @application.get(
        "/spices/search",
        response_model=list[RankedSpice],
        summary="Fuzzy search the spice catalog",
    )
    def spices_search(
        q: str = Query(default="", max_length=255),
        limit: Optional[int] = Query(default=None, ge=1, le=100),
        provider: deps.CatalogProvider = Depends(deps.get_catalog_provider),
    ) -> list[RankedSpice]:
        return fuzzy_search(q, provider(), limit or settings.search_limit)

    @application.post(
        "/spices/submit",
        response_model=SubmitResponse,
        summary="Submit a custom spice to the catalog",
    )
    def spices_submit(
        payload: SubmitRequest,
        auth: None = Depends(deps.require_api_token),
        submitter: deps.CatalogSubmitter = Depends(deps.get_catalog_submitter),
        recorder: deps.SubmissionRecorder = Depends(deps.get_submission_recorder),
    ) -> SubmitResponse:
        try:
            spice = SpiceOrganizer.create_custom_spice(payload.name)
        except InvalidNameError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc

        category = (payload.category or "").strip().upper()
        if category not in ALPHABET:
            category = spice.category

        outcome = submitter(spice.name, category)
        metrics.SUBMISSIONS.labels(status=outcome).inc()
        if outcome == "exists":
            return SubmitResponse(success=True, status="exists", message="Spice already exists in the list")

        recorder(spice.name, category, "approved")
        return SubmitResponse(success=True, status="approved", message="Spice added to the list")

    @application.get(
        "/submissions",
        response_model=list[SpiceSubmission],
        summary="List custom spice submissions",
    )
    def submissions_list(
        provider: deps.SubmissionListProvider = Depends(deps.get_submission_list_provider),
    ) -> list[SpiceSubmission]:
        return provider()

    @application.post(
        "/submissions/{name}/approve",
        response_model=SpiceSubmission,
        summary="Approve a submission and add it to the catalog",
    )
    def submissions_approve(
        name: str,
        auth: None = Depends(deps.require_api_token),
        approver: deps.SubmissionApprover = Depends(deps.get_submission_approver),
        submitter: deps.CatalogSubmitter = Depends(deps.get_catalog_submitter),
    ) -> SpiceSubmission:
        try:
            submission = approver(name)
        except NotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        submitter(submission.name, submission.category)
        return submission

    @application.post(
        "/inventory/save",
        response_model=InventorySaveResponse,
        summary="Save a user's inventory snapshot",
    )
    def inventory_save(
        payload: InventorySaveRequest,
        auth: None = Depends(deps.require_api_token),
        saver: deps.SnapshotSaver = Depends(deps.get_snapshot_saver),
    ) -> InventorySaveResponse:
        stored = saver(payload.user_id, payload.data)
        metrics.SNAPSHOT_SAVES.inc()
        return InventorySaveResponse(
            success=True,
            message="Inventory saved successfully",
            timestamp=stored.last_updated or datetime.now(timezone.utc),
        )

    @application.get(
        "/inventory/{user_id}",
        response_model=InventoryLoadResponse,
        summary="Load a user's inventory snapshot",
    )
    def inventory_load(
        user_id: str,
        loader: deps.SnapshotLoader = Depends(deps.get_snapshot_loader),
    ) -> InventoryLoadResponse:
        snapshot = loader(user_id)
        if snapshot is None:
            return InventoryLoadResponse(success=True, data=None, message="No inventory found for this user")
        return InventoryLoadResponse(success=True, data=snapshot)

    @application.delete(
        "/inventory/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a user's inventory snapshot",
    )
    def inventory_delete(
        user_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.SnapshotDeleter = Depends(deps.get_snapshot_deleter),
    ) -> None:
        if not deleter(user_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No inventory found for user {user_id}",
            )

    @application.get(
        "/inventory/{user_id}/shelves",
        response_model=list[ShelfInfo],
        summary="Compute the shelf distribution for a user's inventory",
    )
    def inventory_shelves(
        user_id: str,
        shelves: Optional[int] = Query(default=None),
        ignore_duplicates: Optional[bool] = Query(default=None),
        loader: deps.SnapshotLoader = Depends(deps.get_snapshot_loader),
    ) -> list[ShelfInfo]:
        organizer = SpiceOrganizer()
        snapshot = loader(user_id)
        if snapshot is not None:
            organizer.restore(snapshot)
        if shelves is not None:
            organizer.num_shelves = shelves
        if ignore_duplicates is not None:
            organizer.ignore_duplicates = ignore_duplicates
        return organizer.calculate_items_per_shelf()

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


class SubmitRequest(BaseModel):
    name: str = Field(max_length=255)
    category: Optional[str] = Field(default=None, max_length=1)


class SubmitResponse(BaseModel):
    success: bool
    status: Literal["approved", "exists"]
    message: str


class InventorySaveRequest(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)
    data: InventorySnapshot


class InventorySaveResponse(BaseModel):
    success: bool
    message: str
    timestamp: datetime


class InventoryLoadResponse(BaseModel):
    success: bool
    data: Optional[InventorySnapshot] = None
    message: Optional[str] = None


app = create_app()

__all__ = ["app", "create_app"]
