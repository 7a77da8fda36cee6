"""Ranking tables.

These are filled by the batch updater that aggregates submissions; this service only
reads them.
"""

from sqlalchemy import BigInteger, Column, Index, Integer, String

from ranking_api.db.base import Base


class AcceptedCount(Base):
    """Number of distinct problems each user has solved."""

    __tablename__ = "accepted_count"

    user_id = Column(String(255), primary_key=True)
    problem_count = Column(Integer, nullable=False)

    __table_args__ = (Index("ix_accepted_count_problem_count", "problem_count"),)


class MaxStreak(Base):
    """Longest run of consecutive days with a new accepted problem."""

    __tablename__ = "max_streaks"

    user_id = Column(String(255), primary_key=True)
    streak = Column(BigInteger, nullable=False)

    __table_args__ = (Index("ix_max_streaks_streak", "streak"),)


class RatedPointSum(Base):
    """Sum of points over the rated problems each user has solved."""

    __tablename__ = "rated_point_sum"

    user_id = Column(String(255), primary_key=True)
    point_sum = Column(BigInteger, nullable=False)

    __table_args__ = (Index("ix_rated_point_sum_point_sum", "point_sum"),)
