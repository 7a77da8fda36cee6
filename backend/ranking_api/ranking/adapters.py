"""Metric-agnostic ranking request pipelines.

Each metric only supplies its store calls (see accessors.py). The two pipelines here
own validation, the not-found rule and error mapping, and the endpoint factories
wrap them into FastAPI handlers:

    ranking_endpoint(get_ac_ranking)
    user_rank_endpoint(get_users_ac_count, get_ac_rank)

Outcomes stay distinct: an empty window is a 200 with [], a user without a value is
NotFoundError (404), any store failure is UpstreamError.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Annotated

from fastapi import Depends, Query

from ranking_api.core.app_exceptions import AppError, NotFoundError, UpstreamError
from ranking_api.core.config import settings
from ranking_api.db.session import get_store
from ranking_api.ranking.schemas import RankingEntry, UserRankResult
from ranking_api.ranking.store import RankingStore
from ranking_api.ranking.window import MAX_RANK_INDEX, RankWindow, parse_window

logger = logging.getLogger(__name__)

WindowFetcher = Callable[[RankingStore, RankWindow], Awaitable[Sequence[RankingEntry]]]
CountFetcher = Callable[[RankingStore, str], Awaitable[int | None]]
RankFetcher = Callable[[RankingStore, int], Awaitable[int]]


def _upstream_error(exc: Exception, operation: str) -> UpstreamError:
    logger.error(
        "Ranking store call failed",
        extra={"operation": operation, "error": str(exc)},
        exc_info=exc,
    )
    details = {"operation": operation}
    if settings.ENV != "prod":
        details.update(type=type(exc).__name__, reason=str(exc))
    return UpstreamError("Ranking store request failed", details=details)


async def fetch_ranking(
    store: RankingStore,
    start: int,
    end: int,
    fetch_window: WindowFetcher,
) -> list[RankingEntry]:
    """
    Validate [start, end) and fetch that slice of a ranking.

    The store's order is kept as is.

    Raises:
        BadRequestError: window longer than the maximum; nothing is fetched
        UpstreamError: the fetch failed
    """
    try:
        window = parse_window(start, end)
    except AppError:
        logger.info("Rejected ranking window", extra={"from": start, "to": end})
        raise

    try:
        entries = await fetch_window(store, window)
    except AppError:
        raise
    except Exception as exc:
        raise _upstream_error(exc, getattr(fetch_window, "__name__", "fetch_window")) from exc
    return list(entries)


async def fetch_user_rank(
    store: RankingStore,
    user: str,
    fetch_count: CountFetcher,
    fetch_rank_for_count: RankFetcher,
) -> UserRankResult:
    """
    Look up a user's value and its rank.

    The rank query only runs once a value has been found.

    Raises:
        NotFoundError: the user has no value for this metric
        UpstreamError: either store call failed
    """
    try:
        count = await fetch_count(store, user)
    except AppError:
        raise
    except Exception as exc:
        raise _upstream_error(exc, getattr(fetch_count, "__name__", "fetch_count")) from exc

    if count is None:
        logger.info("No ranking record for user", extra={"user": user})
        raise NotFoundError(user)

    try:
        rank = await fetch_rank_for_count(store, count)
    except AppError:
        raise
    except Exception as exc:
        raise _upstream_error(exc, getattr(fetch_rank_for_count, "__name__", "fetch_rank_for_count")) from exc

    return UserRankResult(count=count, rank=rank)


def ranking_endpoint(fetch_window: WindowFetcher) -> Callable[..., Awaitable[list[RankingEntry]]]:
    """Build a `GET ?from=&to=` handler for one metric."""

    async def endpoint(
        store: Annotated[RankingStore, Depends(get_store)],
        start: Annotated[
            int, Query(alias="from", ge=0, le=MAX_RANK_INDEX, description="First rank index (inclusive)")
        ],
        end: Annotated[
            int, Query(alias="to", ge=0, le=MAX_RANK_INDEX, description="Last rank index (exclusive)")
        ],
    ) -> list[RankingEntry]:
        return await fetch_ranking(store, start, end, fetch_window)

    return endpoint


def user_rank_endpoint(
    fetch_count: CountFetcher,
    fetch_rank_for_count: RankFetcher,
) -> Callable[..., Awaitable[UserRankResult]]:
    """Build a `GET ?user=` handler for one metric."""

    async def endpoint(
        store: Annotated[RankingStore, Depends(get_store)],
        user: Annotated[str, Query(description="AtCoder user id")],
    ) -> UserRankResult:
        return await fetch_user_rank(store, user, fetch_count, fetch_rank_for_count)

    return endpoint
