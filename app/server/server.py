from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import (
    CORRELATION_HEADER,
    bind_request_context,
    get_module_logger,
)
from infrastructure.routing import RoutingError
from infrastructure.services import get_settings
from modules.og.domain import (
    AccessDeniedError,
    EntityNotFoundError,
    MembershipError,
    OgError,
)
from server.lifespan import lifespan

logger = get_module_logger()

ERROR_STATUS = {
    EntityNotFoundError: 404,
    MembershipError: 400,
    AccessDeniedError: 403,
}


async def og_error_handler(request: Request, exc: Exception):
    """Map group membership and access errors to HTTP responses."""
    status_code = next(
        (code for error, code in ERROR_STATUS.items() if isinstance(exc, error)),
        500,
    )
    logger.warning(
        "request_failed",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def routing_error_handler(request: Request, exc: Exception):
    logger.error(
        "url_generation_failed",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routes."""
    settings = get_settings()
    app = FastAPI(title=settings.SITE_NAME, lifespan=lifespan)
    setup_rate_limiter(app)

    allow_origins = (
        [settings.server.BACKEND_URL]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def correlation_middleware(request: Request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    app.add_exception_handler(OgError, og_error_handler)
    app.add_exception_handler(RoutingError, routing_error_handler)
    app.include_router(api_router)
    return app


handler = create_app()
