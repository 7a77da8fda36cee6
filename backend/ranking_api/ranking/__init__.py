"""Ranking queries: windowed rankings and single-user ranks for several metrics."""

from ranking_api.ranking.schemas import RankingEntry, UserRankResult
from ranking_api.ranking.window import MAX_RANKING_RANGE_LENGTH, RankWindow, parse_window

__all__ = [
    "MAX_RANKING_RANGE_LENGTH",
    "RankWindow",
    "RankingEntry",
    "UserRankResult",
    "parse_window",
]
