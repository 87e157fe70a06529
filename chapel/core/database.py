# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
SQLAlchemy engine singleton and table definitions.
Repositories build SQLAlchemy Core statements over these tables; init_schema
creates them when INIT_SCHEMA is set.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from chapel.core.config import settings

metadata = MetaData()

members = Table(
    "members",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tenant_id", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("email", String(320)),
    Column("phone", String(20)),
    Column("rotation_order", Integer, nullable=False, default=0),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Index("ix_members_tenant_order", "tenant_id", "rotation_order"),
)

chapel_tracking = Table(
    "chapel_tracking",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tenant_id", Integer, nullable=False),
    Column("current_member_id", Integer),
    Column("start_date", DateTime(timezone=True), nullable=False),
    Column("notes", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Index("ix_tracking_tenant_start", "tenant_id", "start_date"),
)

chapel_history = Table(
    "chapel_history",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tenant_id", Integer, nullable=False),
    Column("member_id", Integer, nullable=False),
    Column("start_date", DateTime(timezone=True), nullable=False),
    Column("end_date", DateTime(timezone=True)),
    Column("notes", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Index("ix_history_tenant_start", "tenant_id", "start_date"),
)


def build_engine(url: str) -> Engine:
    """Create an engine for *url*. SQLite gets a single shared connection."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def init_schema(bind: Engine) -> None:
    metadata.create_all(bind)


engine = build_engine(settings.DATABASE_URL)
