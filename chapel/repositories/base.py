# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared plumbing for the SQL repositories."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from chapel.core.exceptions import ChapelError, StorageUnavailable, ValidationError
from chapel.core.logging import get_logger
from chapel.metrics.prometheus import STORAGE_ERRORS

logger = get_logger(__name__)

DATETIME_FIELDS = ("created_at", "updated_at", "start_date", "end_date")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; everything stored here is UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def row_to_dict(row) -> Dict[str, Any]:
    data = dict(row._mapping)
    for field in DATETIME_FIELDS:
        if field in data:
            data[field] = as_utc(data[field])
    return data


class SQLRepository:
    """Base for repositories bound to one engine."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def _read_failed(self, operation: str, exc: SQLAlchemyError) -> None:
        STORAGE_ERRORS.labels(operation="read").inc()
        logger.warning("Storage read failed (%s), serving empty result: %s", operation, exc)

    def _write_failed(self, operation: str, exc: SQLAlchemyError) -> ChapelError:
        if isinstance(exc, IntegrityError):
            logger.warning("Storage rejected write (%s): %s", operation, exc.orig)
            return ValidationError(f"Rejected by a storage constraint during {operation}")
        STORAGE_ERRORS.labels(operation="write").inc()
        logger.error("Storage write failed (%s): %s", operation, exc)
        return StorageUnavailable(f"Storage unavailable during {operation}")
