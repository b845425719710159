"""Engine & Session Factory — builds the async engine and its session factory.

Invariants:
    - Sessions never expire attributes on commit (entities outlive their session)
    - Pool sizing only applied to pooled drivers (SQLite file/memory engines ignore it)

Design Decisions:
    - Separate from infrastructure/database.py: alembic, scripts and test fixtures
      need the raw factory without the manager singleton
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_engine(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> AsyncEngine:
    """Create an async engine; pooled settings only for server databases."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=False)
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
