"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from ranking_api.db.base import Base
from ranking_api.db.session import get_store
from ranking_api.main import app
from ranking_api.models.ranking import AcceptedCount, MaxStreak, RatedPointSum
from ranking_api.ranking.store import RankingStore


@pytest.fixture
def fake_store() -> AsyncMock:
    """RankingStore double; every query method is an AsyncMock."""
    return AsyncMock(spec=RankingStore)


@pytest.fixture
def client(fake_store: AsyncMock) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client whose store dependency is the fake store."""
    app.dependency_overrides[get_store] = lambda: fake_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the ranking tables created."""
    # StaticPool keeps a single connection so every checkout sees the same database
    async_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_engine
    finally:
        await async_engine.dispose()


@pytest.fixture
async def store(engine: AsyncEngine) -> RankingStore:
    """RankingStore seeded with a small population per metric."""
    async with engine.begin() as conn:
        await conn.execute(
            AcceptedCount.__table__.insert(),
            [
                {"user_id": "tourist", "problem_count": 2000},
                {"user_id": "Petr", "problem_count": 1500},
                {"user_id": "chokudai", "problem_count": 1500},
                {"user_id": "snuke", "problem_count": 1200},
                {"user_id": "newbie", "problem_count": 0},
            ],
        )
        await conn.execute(
            MaxStreak.__table__.insert(),
            [
                {"user_id": "kyopro", "streak": 400},
                {"user_id": "tourist", "streak": 30},
                {"user_id": "Petr", "streak": 30},
            ],
        )
        await conn.execute(
            RatedPointSum.__table__.insert(),
            [
                {"user_id": "tourist", "point_sum": 1_250_000},
                {"user_id": "snuke", "point_sum": 900_000},
            ],
        )
    return RankingStore(engine)
