"""Per-app rate limiting and response security headers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from skillscope.shared.config import Config

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=(), interest-cohort=()",
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
}
RETRY_AFTER_SECONDS = 60


def client_address(request: Request) -> str:
    """First X-Forwarded-For hop when behind a proxy, else the peer address."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return get_remote_address(request)


def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Must stay sync: SlowAPIMiddleware does not await it."""
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests. Please try again later."},
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


def setup_rate_limiting(app: FastAPI, config: Config) -> Limiter:
    """Attach an in-memory limiter owned by this app instance.

    Counters live in the limiter's memory storage and expire with their
    window, so nothing outlives the app.
    """
    limiter = Limiter(
        key_func=client_address,
        default_limits=[config.rate_limit],
        storage_uri="memory://",
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter


def setup_security_headers(app: FastAPI) -> None:
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


__all__ = [
    "SECURITY_HEADERS",
    "client_address",
    "setup_rate_limiting",
    "setup_security_headers",
]
