"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support. ``configure`` is the one-call setup
for callers: logging from settings, engine, and the session factory the
parcel store is built on.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from parcel_tracker.app.core.config import Settings, settings
from parcel_tracker.app.core.logging_config import setup_logging

# Create declarative base for models
Base = declarative_base()


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    """Build an async engine for ``config.database_url``."""
    connect_args = {}
    if config.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_async_engine(
        config.database_url,
        echo=config.db_echo,
        connect_args=connect_args,
        future=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine``; safe to share between tasks."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def configure(config: Settings = settings) -> async_sessionmaker[AsyncSession]:
    """
    Set up logging and the database from ``config``.

    The caller owns the engine (``factory.kw["bind"]``) and disposes it
    on shutdown.
    """
    setup_logging(config.log_level, config.log_file)
    return create_session_factory(create_engine_from_settings(config))


async def init_models(bind: AsyncEngine) -> None:
    """
    Create all tables registered on ``Base``.

    Used by tests and bootstrap scripts; production schemas are managed
    by migration tooling.
    """
    # Import models to ensure they are registered with Base
    from parcel_tracker.app.models.parcel import ParcelRecord  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
