"""Database engine configuration."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from ranking_api.core.config import settings


def create_db_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the async SQLAlchemy engine (one connection pool per process)."""
    url = database_url or settings.DATABASE_URL
    pool_kwargs: dict[str, Any] = {}
    # SQLite pools take no sizing arguments
    if not url.startswith("sqlite"):
        pool_kwargs = {
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
        }
    return create_async_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        echo=settings.DB_ECHO,
        **pool_kwargs,
    )
