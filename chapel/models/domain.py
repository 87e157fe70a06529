# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class Member(BaseModel):
    """A participant in a tenant's chapel rotation."""
    id: int
    tenant_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    rotation_order: int
    is_active: bool = True
    created_at: dt.datetime
    updated_at: dt.datetime


class LocationRecord(BaseModel):
    """Where the chapel is right now: one live row per tenant."""
    id: int
    tenant_id: int
    current_member_id: Optional[int] = None
    start_date: dt.datetime
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime


class HistoryEntry(BaseModel):
    """A closed interval during which one member held the chapel."""
    id: int
    tenant_id: int
    member_id: int
    start_date: dt.datetime
    end_date: Optional[dt.datetime] = None
    notes: Optional[str] = None
    created_at: dt.datetime


class CalendarDay(BaseModel):
    """One projected day. Computed on every request, never stored."""
    date: dt.date
    member: Member
    day_of_week: str
