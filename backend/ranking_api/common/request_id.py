"""Request id propagation and access logging."""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ranking_api.core.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Query parameters worth keeping in the access log
_LOGGED_PARAMS = ("from", "to", "user")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request id to the request, its log records and its response.

    A client-supplied X-Request-ID is reused; otherwise a uuid4 is minted. One access
    line is written per request, at ERROR if the handler raised.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        access: dict = {
            "method": request.method,
            "path": request.url.path,
            "query": {k: request.query_params[k] for k in _LOGGED_PARAMS if k in request.query_params},
        }
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access.update(status_code=500, latency_ms=round((time.perf_counter() - started) * 1000, 1))
            logger.error("request", extra=access, exc_info=True)
            raise
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        access.update(
            status_code=response.status_code,
            latency_ms=round((time.perf_counter() - started) * 1000, 1),
            request_id=request_id,
        )
        logger.info("request", extra=access)
        return response
