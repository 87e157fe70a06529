# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Chapel location and hand-off history endpoints.
Thin HTTP layer — delegates ALL logic to TrackingService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from chapel.core.config import settings
from chapel.core.dependencies import get_tenant_id, get_tracking_service
from chapel.models.domain import HistoryEntry, LocationRecord
from chapel.schemas import CurrentLocationResponse, TransitionRequest
from chapel.services.tracking_service import TrackingService

router = APIRouter(prefix="/api/v1", tags=["Tracking"])


@router.get("/tracking/current", response_model=Optional[CurrentLocationResponse])
def get_current_location(
    tenant_id: int = Depends(get_tenant_id),
    service: TrackingService = Depends(get_tracking_service),
):
    """Who holds the chapel right now (null when it was never handed off)."""
    return service.current_with_member(tenant_id)


@router.post("/tracking", response_model=LocationRecord)
def hand_off(
    payload: TransitionRequest,
    tenant_id: int = Depends(get_tenant_id),
    service: TrackingService = Depends(get_tracking_service),
):
    """Move the chapel to a new holder, archiving the previous interval."""
    return service.transition(tenant_id, payload.member_id, payload.notes)


@router.get("/history", response_model=list[HistoryEntry])
def list_history(
    limit: int = Query(
        default=settings.DEFAULT_HISTORY_LIMIT,
        ge=1,
        le=settings.MAX_HISTORY_LIMIT,
        description="Max results",
    ),
    tenant_id: int = Depends(get_tenant_id),
    service: TrackingService = Depends(get_tracking_service),
):
    """Past holders, most recent first."""
    return service.list_history(tenant_id, limit=limit)
