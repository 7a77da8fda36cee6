"""Ranking endpoints: one windowed ranking and one user rank per metric."""

from fastapi import APIRouter

from ranking_api.ranking.accessors import (
    get_ac_rank,
    get_ac_ranking,
    get_rated_point_sum_rank,
    get_rated_point_sum_ranking,
    get_streak_rank,
    get_streak_ranking,
    get_users_ac_count,
    get_users_rated_point_sum,
    get_users_streak_count,
)
from ranking_api.ranking.adapters import ranking_endpoint, user_rank_endpoint
from ranking_api.ranking.schemas import RankingEntry, UserRankResult

router = APIRouter()

_RANKING_RESPONSES = {400: {"description": "Window longer than the maximum"}}
_USER_RANK_RESPONSES = {404: {"description": "User has no value for this metric"}}

# (path stem, window fetch, per-user value fetch, value -> rank fetch)
_METRICS = [
    ("ac", get_ac_ranking, get_users_ac_count, get_ac_rank),
    ("streak", get_streak_ranking, get_users_streak_count, get_streak_rank),
    (
        "rated_point_sum",
        get_rated_point_sum_ranking,
        get_users_rated_point_sum,
        get_rated_point_sum_rank,
    ),
]

for name, fetch_window, fetch_count, fetch_rank_for_count in _METRICS:
    router.add_api_route(
        f"/{name}_ranking",
        ranking_endpoint(fetch_window),
        methods=["GET"],
        name=f"{name}_ranking",
        response_model=list[RankingEntry],
        responses=_RANKING_RESPONSES,
        summary=f"{name} ranking window",
    )
    router.add_api_route(
        f"/user/{name}_rank",
        user_rank_endpoint(fetch_count, fetch_rank_for_count),
        methods=["GET"],
        name=f"user_{name}_rank",
        response_model=UserRankResult,
        responses=_USER_RANK_RESPONSES,
        summary=f"User {name} rank",
    )
