"""Request logging middleware."""

import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    """Log every request on the way in and its outcome on the way out."""
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    logger.info(
        f"{request.method} {request.url.path} received "
        f"(ip={client}, user_agent={request.headers.get('user-agent', '-')})"
    )
    try:
        response = await call_next(request)
    except Exception:
        elapsed = (time.perf_counter() - start) * 1000
        logger.exception(f"{request.method} {request.url.path} failed after {elapsed:.1f}ms")
        raise
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} in {elapsed:.1f}ms"
    )
    return response
