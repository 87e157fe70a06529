# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Member data access.
Rotation participants per tenant, always read in rotation order.
NO business rules here — pure CRUD.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from chapel.core.database import members
from chapel.models.domain import Member
from chapel.repositories.base import SQLRepository, row_to_dict

UPDATABLE_FIELDS = ("name", "email", "phone", "is_active")


class MemberRepository(SQLRepository):
    """SQL storage for the ``members`` table."""

    # ── Read ──

    def list(self, tenant_id: int, active_only: bool = False) -> List[Member]:
        query = select(members).where(members.c.tenant_id == tenant_id)
        if active_only:
            query = query.where(members.c.is_active.is_(True))
        query = query.order_by(members.c.rotation_order, members.c.id)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).fetchall()
        except SQLAlchemyError as exc:
            self._read_failed("members.list", exc)
            return []
        return [Member(**row_to_dict(r)) for r in rows]

    def get(self, tenant_id: int, member_id: int) -> Optional[Member]:
        query = select(members).where(
            members.c.id == member_id, members.c.tenant_id == tenant_id
        )
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).fetchone()
        except SQLAlchemyError as exc:
            self._read_failed("members.get", exc)
            return None
        return Member(**row_to_dict(row)) if row else None

    # ── Write ──

    def create(
        self,
        tenant_id: int,
        name: str,
        email: Optional[str],
        phone: Optional[str],
        now: datetime,
    ) -> Member:
        """Insert at the tail of the rotation (max order + 1, or 0)."""
        try:
            with self._engine.begin() as conn:
                max_order = conn.execute(
                    select(func.max(members.c.rotation_order)).where(
                        members.c.tenant_id == tenant_id
                    )
                ).scalar()
                next_order = 0 if max_order is None else max_order + 1
                values: Dict[str, Any] = {
                    "tenant_id": tenant_id,
                    "name": name,
                    "email": email,
                    "phone": phone,
                    "rotation_order": next_order,
                    "is_active": True,
                    "created_at": now,
                    "updated_at": now,
                }
                result = conn.execute(insert(members).values(**values))
                member_id = result.inserted_primary_key[0]
        except SQLAlchemyError as exc:
            raise self._write_failed("members.create", exc) from exc
        return Member(id=member_id, **values)

    def update(
        self, tenant_id: int, member_id: int, fields: Dict[str, Any], now: datetime
    ) -> int:
        """Write only the supplied fields. Returns the affected row count."""
        values = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        values["updated_at"] = now
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(members)
                    .where(members.c.id == member_id, members.c.tenant_id == tenant_id)
                    .values(**values)
                )
        except SQLAlchemyError as exc:
            raise self._write_failed("members.update", exc) from exc
        return result.rowcount

    def delete(self, tenant_id: int, member_id: int) -> int:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    delete(members).where(
                        members.c.id == member_id, members.c.tenant_id == tenant_id
                    )
                )
        except SQLAlchemyError as exc:
            raise self._write_failed("members.delete", exc) from exc
        return result.rowcount

    def reorder(self, tenant_id: int, member_ids: List[int], now: datetime) -> int:
        """Set rotation_order to each id's position, all in one transaction."""
        affected = 0
        try:
            with self._engine.begin() as conn:
                for position, member_id in enumerate(member_ids):
                    result = conn.execute(
                        update(members)
                        .where(members.c.id == member_id, members.c.tenant_id == tenant_id)
                        .values(rotation_order=position, updated_at=now)
                    )
                    affected += result.rowcount
        except SQLAlchemyError as exc:
            raise self._write_failed("members.reorder", exc) from exc
        return affected
