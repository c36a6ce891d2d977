"""
Per-client request limits.

Every route shares one per-IP budget (``RATE_LIMIT_PER_MINUTE``), which
mostly matters for the manual ingestion trigger and authoring endpoints.
A budget of 0 turns the limiter off.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import config

RETRY_AFTER_SECONDS = 60

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{max(config.RATE_LIMIT_PER_MINUTE, 1)}/minute"],
    storage_uri="memory://",  # per process, resets on restart
    enabled=config.RATE_LIMIT_PER_MINUTE > 0,
)


def too_many_requests(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    retry_after = getattr(exc, "retry_after", RETRY_AFTER_SECONDS)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Too many requests: {exc.detail}", "retry_after": retry_after},
        headers={"Retry-After": str(retry_after)},
    )


def setup_rate_limiting(app: FastAPI):
    """Attach the shared limiter, its middleware and the 429 handler."""
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, too_many_requests)
