"""Rate limiting for the login endpoint."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings

logger = get_module_logger()

limiter = Limiter(
    key_func=get_remote_address,
)


def login_rate_limit() -> str:
    """Limit string for login attempts, read from settings on each call."""
    return get_settings().server.LOGIN_RATE_LIMIT


async def rate_limit_handler(request: Request, exc: Exception):
    """Return 429 with a JSON body when a client exceeds its limit."""
    if isinstance(exc, RateLimitExceeded):
        logger.warning(
            "rate_limit_exceeded",
            path=request.url.path,
            limit=str(exc.detail),
        )
        return JSONResponse(
            status_code=429,
            content={"detail": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI):
    """Attach the shared limiter and its error handler to the application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    return limiter
