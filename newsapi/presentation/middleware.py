"""HTTP middleware — request id binding and access logging."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from newsapi.infrastructure.logging.request_context import bind_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Bind a request id for log records and log the finished request."""
    request_id = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "%s %s → %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
