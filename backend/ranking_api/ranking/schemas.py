"""Ranking response schemas."""

from pydantic import BaseModel, ConfigDict


class RankingEntry(BaseModel):
    """One participant in a ranking window."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    count: int


class UserRankResult(BaseModel):
    """A single user's metric value and its rank.

    rank is the number of users whose value is at least count, so the leader is 1 and
    users with equal values share the lower position.
    """

    model_config = ConfigDict(frozen=True)

    count: int
    rank: int
