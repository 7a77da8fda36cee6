"""Metric bindings for the generic ranking pipelines.

Each function selects the store query for its metric and renames the store's value
column to the generic `count` field. Nothing else happens here.
"""

from ranking_api.ranking.schemas import RankingEntry
from ranking_api.ranking.store import RankingStore
from ranking_api.ranking.window import RankWindow


# Accepted count


async def get_ac_ranking(store: RankingStore, window: RankWindow) -> list[RankingEntry]:
    rows = await store.load_accepted_count_in_range(window)
    return [RankingEntry(user_id=row.user_id, count=row.problem_count) for row in rows]


async def get_users_ac_count(store: RankingStore, user_id: str) -> int | None:
    return await store.get_users_accepted_count(user_id)


async def get_ac_rank(store: RankingStore, count: int) -> int:
    return await store.get_accepted_count_rank(count)


# Longest streak


async def get_streak_ranking(store: RankingStore, window: RankWindow) -> list[RankingEntry]:
    rows = await store.load_streak_count_in_range(window)
    return [RankingEntry(user_id=row.user_id, count=row.streak) for row in rows]


async def get_users_streak_count(store: RankingStore, user_id: str) -> int | None:
    return await store.get_users_streak_count(user_id)


async def get_streak_rank(store: RankingStore, count: int) -> int:
    return await store.get_streak_count_rank(count)


# Rated point sum


async def get_rated_point_sum_ranking(store: RankingStore, window: RankWindow) -> list[RankingEntry]:
    rows = await store.load_rated_point_sum_in_range(window)
    return [RankingEntry(user_id=row.user_id, count=row.point_sum) for row in rows]


async def get_users_rated_point_sum(store: RankingStore, user_id: str) -> int | None:
    return await store.get_users_rated_point_sum(user_id)


async def get_rated_point_sum_rank(store: RankingStore, count: int) -> int:
    return await store.get_rated_point_sum_rank(count)
