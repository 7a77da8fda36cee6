"""Ranking store: read-only queries over the ranking tables.

The store wraps an AsyncEngine, i.e. a connection pool. One instance is shared by all
requests; every query checks out its own connection, so concurrent requests never
wait on each other's statements. Errors from the driver are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import Row, func, select, text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import InstrumentedAttribute

from ranking_api.models.ranking import AcceptedCount, MaxStreak, RatedPointSum
from ranking_api.ranking.window import RankWindow

logger = logging.getLogger(__name__)


class RankingStore:
    """Query client for accepted-count, streak and rated-point-sum rankings."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()

    # --- accepted count ---

    async def load_accepted_count_in_range(self, window: RankWindow) -> Sequence[Row]:
        """Rows (user_id, problem_count) for the window, best first."""
        return await self._load_in_range(AcceptedCount.user_id, AcceptedCount.problem_count, window)

    async def get_users_accepted_count(self, user_id: str) -> int | None:
        return await self._get_users_value(AcceptedCount.user_id, AcceptedCount.problem_count, user_id)

    async def get_accepted_count_rank(self, accepted_count: int) -> int:
        return await self._count_at_least(AcceptedCount.problem_count, accepted_count)

    # --- longest streak ---

    async def load_streak_count_in_range(self, window: RankWindow) -> Sequence[Row]:
        """Rows (user_id, streak) for the window, best first."""
        return await self._load_in_range(MaxStreak.user_id, MaxStreak.streak, window)

    async def get_users_streak_count(self, user_id: str) -> int | None:
        return await self._get_users_value(MaxStreak.user_id, MaxStreak.streak, user_id)

    async def get_streak_count_rank(self, streak_count: int) -> int:
        return await self._count_at_least(MaxStreak.streak, streak_count)

    # --- rated point sum ---

    async def load_rated_point_sum_in_range(self, window: RankWindow) -> Sequence[Row]:
        """Rows (user_id, point_sum) for the window, best first."""
        return await self._load_in_range(RatedPointSum.user_id, RatedPointSum.point_sum, window)

    async def get_users_rated_point_sum(self, user_id: str) -> int | None:
        return await self._get_users_value(RatedPointSum.user_id, RatedPointSum.point_sum, user_id)

    async def get_rated_point_sum_rank(self, rated_point_sum: int) -> int:
        return await self._count_at_least(RatedPointSum.point_sum, rated_point_sum)

    # --- shared queries ---

    async def _load_in_range(
        self,
        user_column: InstrumentedAttribute,
        value_column: InstrumentedAttribute,
        window: RankWindow,
    ) -> Sequence[Row]:
        # user_id breaks ties so that consecutive windows never overlap
        stmt = (
            select(user_column, value_column)
            .order_by(value_column.desc(), user_column.asc())
            .offset(window.offset)
            .limit(window.limit)
        )
        async with self._engine.connect() as conn:
            result = await conn.execute(stmt)
            rows = result.all()
        logger.debug(
            "Loaded ranking window",
            extra={
                "table": value_column.class_.__tablename__,
                "from": window.start,
                "to": window.end,
                "rows": len(rows),
            },
        )
        return rows

    async def _get_users_value(
        self,
        user_column: InstrumentedAttribute,
        value_column: InstrumentedAttribute,
        user_id: str,
    ) -> int | None:
        # AtCoder user ids are case-insensitive
        stmt = (
            select(value_column)
            .where(func.lower(user_column) == user_id.lower())
            .limit(1)
        )
        async with self._engine.connect() as conn:
            value = (await conn.execute(stmt)).scalar()
        return None if value is None else int(value)

    async def _count_at_least(self, value_column: InstrumentedAttribute, value: int) -> int:
        stmt = select(func.count()).select_from(value_column.class_).where(value_column >= value)
        async with self._engine.connect() as conn:
            return int((await conn.execute(stmt)).scalar_one())
