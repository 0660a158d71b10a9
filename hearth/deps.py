"""FastAPI dependencies for the Hearth API.

Provides:
- Per-endpoint fixed-window rate limiters (keyed by client IP)
"""

import logging

from fastapi import Depends, Request
from slowapi.util import get_remote_address

from .errors import RateLimitedError
from .infra.ratelimit import FixedWindowRateLimiter
from .settings import settings

logger = logging.getLogger("hearth.ratelimit")

_extract_limiter = FixedWindowRateLimiter(
    max_requests=settings.extract_rate_limit_max,
    window_ms=settings.extract_rate_limit_window_ms,
)


def get_extract_limiter() -> FixedWindowRateLimiter:
    return _extract_limiter


def enforce_extract_rate_limit(
    request: Request,
    limiter: FixedWindowRateLimiter = Depends(get_extract_limiter),
) -> None:
    """Reject the request with 429 once the caller's window is used up."""
    client_ip = get_remote_address(request)
    if not limiter.allow(client_ip):
        logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
        raise RateLimitedError()
