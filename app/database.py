"""Async engine, session factory and the declarative base for configuration records."""
import json
import logging
from datetime import datetime, date, timezone
from enum import Enum
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import DateTime, Integer, event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, declared_attr
from sqlalchemy.pool import StaticPool
from psycopg.types.json import set_json_dumps

from app.config import settings


logger = logging.getLogger(__name__)


class ConfigJSONEncoder(json.JSONEncoder):
    """Encodes the enum and date values that end up inside JSON columns."""
    def default(self, obj):
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


def config_json_dumps(obj) -> str:
    return json.dumps(obj, cls=ConfigJSONEncoder)


# psycopg serializes JSONB parameters itself
set_json_dumps(config_json_dumps)


def resolve_database_url(url: str) -> str:
    """Pick the async driver: psycopg for PostgreSQL, aiosqlite for SQLite."""
    for prefix in ("postgresql+asyncpg://", "postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url[len("sqlite://"):]
    return url


database_url = resolve_database_url(settings.DATABASE_URL)
is_sqlite = database_url.startswith("sqlite")

if is_sqlite:
    engine_options = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url:
        # One shared connection, otherwise every checkout sees an empty database
        engine_options["poolclass"] = StaticPool
else:
    engine_options = {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
    }

engine = create_async_engine(
    database_url,
    echo=settings.DEBUG,
    json_serializer=config_json_dumps,
    **engine_options,
)

if is_sqlite:
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite leaves foreign key enforcement off per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


class ConfigRecordMixin:
    """
    Columns shared by every configuration record.

    ``version`` is SQLAlchemy's version counter: it starts at 1 and every
    UPDATE checks and bumps it, so a stale write raises StaleDataError.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Owning user scope key"
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    @declared_attr.directive
    def __mapper_args__(cls):
        return {"version_id_col": cls.version}


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session.

    The whole request is one transaction: it commits when the endpoint
    returns and rolls back on any exception.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_db_session():
    """Session for startup tasks outside a request."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def import_models() -> None:
    """Import all model modules so they register with Base.metadata."""
    from app.models import (  # noqa: F401
        inventory_group,
        task_sequence,
        pick_strategy,
        stock_allocation,
        task_planning,
        template,
        wizard,
    )


async def init_db() -> None:
    """Create missing tables."""
    import_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready: %d tables", len(Base.metadata.tables))
