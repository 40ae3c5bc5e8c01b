"""Database setup and session management."""

import logging
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from botadmin.config import settings

logger = logging.getLogger(__name__)

# Current schema version - increment when making schema changes
SCHEMA_VERSION = 1  # v1 = parameters table


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class SchemaVersion(Base):
    """Tracks database schema version for safe migrations."""

    __tablename__ = "schema_version"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)
    version: Mapped[int] = mapped_column(Integer, default=1)
    applied_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)


class Parameter(Base):
    """A named bot configuration value.

    Values are stored as text whatever their type; ``type`` only tells the
    admin UI how to edit and display them.
    """

    __tablename__ = "parameters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)  # text, number, url, key, boolean, email
    value: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def init_db() -> None:
    """Initialize database tables with safe schema versioning.

    Uses create_all which is idempotent - only creates tables that don't exist.
    """
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        result = await session.execute(select(SchemaVersion).limit(1))
        version_record = result.scalar_one_or_none()

        if version_record is None:
            session.add(
                SchemaVersion(
                    id=1,
                    version=SCHEMA_VERSION,
                    description=f"Initial schema v{SCHEMA_VERSION}",
                )
            )
            await session.commit()
            logger.info(f"Database initialized with schema version {SCHEMA_VERSION}")
        else:
            logger.debug(f"Database schema is current (v{version_record.version})")


async def close_db() -> None:
    """Close database connections gracefully."""
    await engine.dispose()
