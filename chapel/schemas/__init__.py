# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from chapel.models.domain import LocationRecord, Member

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not EMAIL_PATTERN.match(v):
        raise ValueError("email must be a valid address")
    return v


# ── Member Schemas ──

class MemberCreateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Display name")
    email: Optional[str] = Field(default=None, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=20)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return _check_email(v)


class MemberUpdateRequest(BaseModel):
    """Partial update model for PATCH /api/v1/members/{member_id}."""
    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=20)
    is_active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return _check_email(v)

    @field_validator("is_active")
    @classmethod
    def validate_is_active(cls, v: Optional[bool]) -> bool:
        if v is None:
            raise ValueError("is_active may be omitted but not null")
        return v


class MemberReorderRequest(BaseModel):
    member_ids: list[int] = Field(..., description="Member ids in their new rotation order")


class UpdateResult(BaseModel):
    updated: int


class DeleteResult(BaseModel):
    deleted: int


class ReorderResult(BaseModel):
    reordered: int


# ── Tracking Schemas ──

class TransitionRequest(BaseModel):
    member_id: int = Field(..., ge=1, description="New holder")
    notes: Optional[str] = Field(default=None, max_length=5000)


class CurrentLocationResponse(LocationRecord):
    """The live location record with the holder embedded (null once deleted)."""
    member: Optional[Member] = None


# ── Errors ──

class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
