# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Hand-off history (ledger) data access.
Append-only: rows are inserted by the tracker and never updated afterwards.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from chapel.core.database import chapel_history
from chapel.models.domain import HistoryEntry
from chapel.repositories.base import SQLRepository, row_to_dict


class HistoryRepository(SQLRepository):
    """SQL storage for the ``chapel_history`` table."""

    # ── Read ──

    def list(self, tenant_id: int, limit: int) -> List[HistoryEntry]:
        query = (
            select(chapel_history)
            .where(chapel_history.c.tenant_id == tenant_id)
            .order_by(chapel_history.c.start_date.desc(), chapel_history.c.id.desc())
            .limit(limit)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).fetchall()
        except SQLAlchemyError as exc:
            self._read_failed("history.list", exc)
            return []
        return [HistoryEntry(**row_to_dict(r)) for r in rows]

    # ── Write (inside a caller's transaction) ──

    def append(
        self,
        conn: Connection,
        tenant_id: int,
        member_id: int,
        start_date: datetime,
        end_date: Optional[datetime],
        notes: Optional[str],
        now: datetime,
    ) -> int:
        """Archive one holder interval. Returns the new entry id."""
        result = conn.execute(
            insert(chapel_history).values(
                tenant_id=tenant_id,
                member_id=member_id,
                start_date=start_date,
                end_date=end_date,
                notes=notes,
                created_at=now,
            )
        )
        return result.inserted_primary_key[0]
