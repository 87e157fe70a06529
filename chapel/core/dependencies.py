# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services, resolve the tenant.
"""

from typing import Optional

from fastapi import Header, HTTPException

from chapel.core.database import engine
from chapel.repositories.history_repository import HistoryRepository
from chapel.repositories.member_repository import MemberRepository
from chapel.repositories.tracking_repository import TrackingRepository
from chapel.services.calendar_service import CalendarService
from chapel.services.member_service import MemberService
from chapel.services.notification_client import NotificationClient
from chapel.services.tracking_service import TrackingService

# ── Singleton repository instances (shared engine) ──
_member_repo = MemberRepository(engine)
_history_repo = HistoryRepository(engine)
_tracking_repo = TrackingRepository(engine, _history_repo)
_notification_client = NotificationClient()

# ── Service instances (with injected dependencies) ──
_member_service = MemberService(member_repo=_member_repo)
_tracking_service = TrackingService(
    tracking_repo=_tracking_repo,
    history_repo=_history_repo,
    member_repo=_member_repo,
    notification_client=_notification_client,
)
_calendar_service = CalendarService(
    member_repo=_member_repo,
    tracking_repo=_tracking_repo,
)


# ── FastAPI dependency functions ──
def get_tenant_id(x_tenant_id: Optional[str] = Header(default=None)) -> int:
    """Tenant identity, set by the gateway after authentication."""
    if x_tenant_id is None:
        raise HTTPException(status_code=401, detail="Missing X-Tenant-ID header")
    try:
        tenant_id = int(x_tenant_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid X-Tenant-ID header")
    if tenant_id < 1:
        raise HTTPException(status_code=401, detail="Invalid X-Tenant-ID header")
    return tenant_id


def get_member_service() -> MemberService:
    return _member_service


def get_tracking_service() -> TrackingService:
    return _tracking_service


def get_calendar_service() -> CalendarService:
    return _calendar_service
