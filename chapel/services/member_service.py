# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Member management — business logic for the rotation roster.
Coordinates repository writes with metrics, logging and validation.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from chapel.core.exceptions import ValidationError
from chapel.core.logging import get_logger
from chapel.metrics.prometheus import MEMBERS_CREATED, MEMBERS_DELETED, ROTATION_REORDERS
from chapel.models.domain import Member
from chapel.repositories.member_repository import MemberRepository

logger = get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemberService:
    """Business logic for the ordered member roster of each tenant."""

    def __init__(
        self,
        member_repo: MemberRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._members = member_repo
        self._clock = clock

    # ── Queries ──

    def list_members(self, tenant_id: int) -> list[Member]:
        return self._members.list(tenant_id)

    def list_active(self, tenant_id: int) -> list[Member]:
        return self._members.list(tenant_id, active_only=True)

    def get_member(self, tenant_id: int, member_id: int) -> Optional[Member]:
        return self._members.get(tenant_id, member_id)

    # ── Commands ──

    def create_member(
        self,
        tenant_id: int,
        name: Optional[str],
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Member:
        """Append a member to the end of the rotation. Raises ValidationError on a blank name."""
        if name is None or not name.strip():
            raise ValidationError("Member name is required")

        member = self._members.create(tenant_id, name.strip(), email, phone, self._clock())
        MEMBERS_CREATED.inc()
        logger.info(
            "Member created: id=%s, order=%d",
            member.id, member.rotation_order,
            extra={"tenant_id": tenant_id},
        )
        return member

    def update_member(self, tenant_id: int, member_id: int, fields: dict[str, Any]) -> int:
        """Apply a partial update. Returns affected rows (0 for an unknown id)."""
        if "name" in fields:
            name = fields["name"]
            if name is None or not name.strip():
                raise ValidationError("Member name cannot be blank")
            fields = {**fields, "name": name.strip()}
        if "is_active" in fields and fields["is_active"] is None:
            raise ValidationError("is_active cannot be null")

        updated = self._members.update(tenant_id, member_id, fields, self._clock())
        logger.info(
            "Member updated: id=%s, fields=%s, rows=%d",
            member_id, sorted(fields), updated,
            extra={"tenant_id": tenant_id},
        )
        return updated

    def delete_member(self, tenant_id: int, member_id: int) -> int:
        """Remove a member. Remaining orders keep their gaps."""
        deleted = self._members.delete(tenant_id, member_id)
        if deleted:
            MEMBERS_DELETED.inc()
        logger.info(
            "Member deleted: id=%s, rows=%d", member_id, deleted,
            extra={"tenant_id": tenant_id},
        )
        return deleted

    def reorder_members(self, tenant_id: int, member_ids: list[int]) -> int:
        reordered = self._members.reorder(tenant_id, member_ids, self._clock())
        ROTATION_REORDERS.inc()
        logger.info(
            "Rotation reordered: requested=%d, rows=%d",
            len(member_ids), reordered,
            extra={"tenant_id": tenant_id},
        )
        return reordered
