# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member roster endpoints.
Thin HTTP layer — delegates ALL logic to MemberService.
"""

from fastapi import APIRouter, Depends

from chapel.core.dependencies import get_member_service, get_tenant_id
from chapel.models.domain import Member
from chapel.schemas import (
    DeleteResult,
    MemberCreateRequest,
    MemberReorderRequest,
    MemberUpdateRequest,
    ReorderResult,
    UpdateResult,
)
from chapel.services.member_service import MemberService

router = APIRouter(prefix="/api/v1", tags=["Members"])


@router.get("/members", response_model=list[Member])
def list_members(
    tenant_id: int = Depends(get_tenant_id),
    service: MemberService = Depends(get_member_service),
):
    """List the tenant's members in rotation order."""
    return service.list_members(tenant_id)


@router.post("/members", status_code=201, response_model=Member)
def create_member(
    payload: MemberCreateRequest,
    tenant_id: int = Depends(get_tenant_id),
    service: MemberService = Depends(get_member_service),
):
    """Add a member at the end of the rotation."""
    return service.create_member(
        tenant_id,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )


@router.put("/members/order", response_model=ReorderResult)
def reorder_members(
    payload: MemberReorderRequest,
    tenant_id: int = Depends(get_tenant_id),
    service: MemberService = Depends(get_member_service),
):
    """Rewrite the rotation order from the given id sequence."""
    return {"reordered": service.reorder_members(tenant_id, payload.member_ids)}


@router.patch("/members/{member_id}", response_model=UpdateResult)
def update_member(
    member_id: int,
    payload: MemberUpdateRequest,
    tenant_id: int = Depends(get_tenant_id),
    service: MemberService = Depends(get_member_service),
):
    """Partially update a member. Unknown ids report zero updated rows."""
    fields = payload.model_dump(exclude_unset=True)
    return {"updated": service.update_member(tenant_id, member_id, fields)}


@router.delete("/members/{member_id}", response_model=DeleteResult)
def delete_member(
    member_id: int,
    tenant_id: int = Depends(get_tenant_id),
    service: MemberService = Depends(get_member_service),
):
    """Remove a member from the rotation."""
    return {"deleted": service.delete_member(tenant_id, member_id)}
