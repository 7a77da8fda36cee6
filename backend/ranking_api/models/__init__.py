"""Database models."""

from ranking_api.models.ranking import AcceptedCount, MaxStreak, RatedPointSum

__all__ = [
    "AcceptedCount",
    "MaxStreak",
    "RatedPointSum",
]
