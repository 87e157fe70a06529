# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Calendar projection endpoint.
"""

from fastapi import APIRouter, Depends, Query

from chapel.core.config import settings
from chapel.core.dependencies import get_calendar_service, get_tenant_id
from chapel.models.domain import CalendarDay
from chapel.services.calendar_service import CalendarService

router = APIRouter(prefix="/api/v1", tags=["Calendar"])


@router.get("/calendar", response_model=list[CalendarDay])
def get_calendar(
    days: int = Query(
        default=settings.DEFAULT_CALENDAR_DAYS,
        ge=1,
        le=settings.MAX_CALENDAR_DAYS,
        description="Number of days to project, starting today",
    ),
    tenant_id: int = Depends(get_tenant_id),
    service: CalendarService = Depends(get_calendar_service),
):
    """Project upcoming holders by cycling through the active members."""
    return service.project(tenant_id, days)
