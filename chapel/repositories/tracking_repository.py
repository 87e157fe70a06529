# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Chapel location tracking.
One live row per tenant; a hand-off archives the previous holder into the
history ledger and rewrites the live row, all in a single transaction.
"""

from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from chapel.core.database import chapel_tracking
from chapel.models.domain import LocationRecord
from chapel.repositories.base import SQLRepository, row_to_dict
from chapel.repositories.history_repository import HistoryRepository


def _current_query(tenant_id: int):
    return (
        select(chapel_tracking)
        .where(chapel_tracking.c.tenant_id == tenant_id)
        .order_by(chapel_tracking.c.start_date.desc(), chapel_tracking.c.id.desc())
        .limit(1)
    )


class TrackingRepository(SQLRepository):
    """SQL storage for the ``chapel_tracking`` table."""

    def __init__(self, engine: Engine, history_repo: HistoryRepository):
        super().__init__(engine)
        self._history = history_repo

    # ── Read ──

    def current(self, tenant_id: int) -> Optional[LocationRecord]:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(_current_query(tenant_id)).fetchone()
        except SQLAlchemyError as exc:
            self._read_failed("tracking.current", exc)
            return None
        return LocationRecord(**row_to_dict(row)) if row else None

    # ── Write ──

    def transition(
        self,
        tenant_id: int,
        member_id: int,
        notes: Optional[str],
        now: datetime,
    ) -> Tuple[LocationRecord, Optional[int]]:
        """
        Hand the chapel to *member_id*.
        Returns the new live record and the id of the archived history
        entry (None when there was no previous holder).
        """
        try:
            with self._engine.begin() as conn:
                existing = self._lock_current(conn, tenant_id)
                archived_id = None
                if existing is not None and existing["current_member_id"] is not None:
                    archived_id = self._history.append(
                        conn,
                        tenant_id=tenant_id,
                        member_id=existing["current_member_id"],
                        start_date=existing["start_date"],
                        end_date=now,
                        notes=existing["notes"],
                        now=now,
                    )

                if existing is not None:
                    conn.execute(
                        update(chapel_tracking)
                        .where(chapel_tracking.c.id == existing["id"])
                        .values(
                            current_member_id=member_id,
                            start_date=now,
                            notes=notes,
                            updated_at=now,
                        )
                    )
                    record_id = existing["id"]
                    created_at = existing["created_at"]
                else:
                    result = conn.execute(
                        insert(chapel_tracking).values(
                            tenant_id=tenant_id,
                            current_member_id=member_id,
                            start_date=now,
                            notes=notes,
                            created_at=now,
                            updated_at=now,
                        )
                    )
                    record_id = result.inserted_primary_key[0]
                    created_at = now
        except SQLAlchemyError as exc:
            raise self._write_failed("tracking.transition", exc) from exc

        record = LocationRecord(
            id=record_id,
            tenant_id=tenant_id,
            current_member_id=member_id,
            start_date=now,
            notes=notes,
            created_at=created_at,
            updated_at=now,
        )
        return record, archived_id

    # ── Internal ──

    def _lock_current(self, conn: Connection, tenant_id: int) -> Optional[dict]:
        """Read the live row, holding a row lock where the backend has one."""
        query = _current_query(tenant_id)
        if conn.dialect.name in ("postgresql", "mysql"):
            query = query.with_for_update()
        row = conn.execute(query).fetchone()
        return row_to_dict(row) if row else None
