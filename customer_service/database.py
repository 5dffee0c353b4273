"""
Customer Service - Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `build_engine()` creates a pooled async engine from `Settings`;
       `create_app()` stores it and its session factory on `app.state`.
       `get_db_session()` provides one session per request that commits on
       success and rolls back on error.
When:  Engine is created once per app; sessions are created per request.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from Settings.
    SQLite URLs (used by the test-suite) get SQLAlchemy's default pool,
    with StaticPool for in-memory databases so every session sees the
    same database.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from customer_service.config import Settings
from customer_service.exceptions import storage_error


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Engine & Session Factory ──────────────────────────────────────────────
def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by `settings`.

    No connection is opened here; the pool connects lazily on first use.
    """
    url = settings.sqlalchemy_url
    options = {"echo": settings.log_level == "DEBUG"}

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )

    return create_async_engine(url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory with expire_on_commit=False (rows are mapped before commit anyway)."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the app's factory
        2. Yields it to the route (the repository issues its statement)
        3. On success: commits
        4. On error: rolls back and re-raises for the global error handler;
           a failed commit is raised as OperationError
        5. Always: closes the session (returns connection to pool)

    Routes must depend on it with `scope="function"` so the commit finishes
    before the response is built; a failed commit then answers 500.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            raise storage_error(e) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine(engine: AsyncEngine) -> None:
    """Closes all pooled connections. Called from the app lifespan on shutdown."""
    await engine.dispose()
