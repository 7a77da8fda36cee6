"""Store dependency for request handlers."""

from fastapi import Request

from ranking_api.ranking.store import RankingStore


def get_store(request: Request) -> RankingStore:
    """Dependency returning the process-wide ranking store.

    The store is created by the application lifespan; tests override this
    dependency with a fake.
    """
    return request.app.state.store
