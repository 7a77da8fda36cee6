"""Ranking window parsing and validation."""

from __future__ import annotations

from dataclasses import dataclass

from ranking_api.core.app_exceptions import BadRequestError

MAX_RANKING_RANGE_LENGTH = 1_000

# Bounds travel to the database as OFFSET/LIMIT, which are signed 64-bit there
MAX_RANK_INDEX = 2**63 - 1


@dataclass(frozen=True)
class RankWindow:
    """Half-open interval [start, end) over a descending ranking.

    A window whose end is at or before its start is empty, not invalid: it selects
    nothing (e.g. a page past the end of the ranking).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if not 0 <= bound <= MAX_RANK_INDEX:
                raise BadRequestError(
                    f"Window bounds must be between 0 and {MAX_RANK_INDEX}",
                    code="RANKING_RANGE_INVALID",
                    details={"from": self.start, "to": self.end},
                )

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    @property
    def offset(self) -> int:
        return self.start

    @property
    def limit(self) -> int:
        return len(self)


def parse_window(start: int, end: int) -> RankWindow:
    """
    Build the window [start, end) and enforce the length cap.

    Raises:
        BadRequestError: if a bound is out of range, or the window is longer than
            MAX_RANKING_RANGE_LENGTH
    """
    window = RankWindow(start=start, end=end)
    if len(window) > MAX_RANKING_RANGE_LENGTH:
        raise BadRequestError(
            f"Ranking window may contain at most {MAX_RANKING_RANGE_LENGTH} entries",
            details={
                "from": start,
                "to": end,
                "length": len(window),
                "max_length": MAX_RANKING_RANGE_LENGTH,
            },
        )
    return window
