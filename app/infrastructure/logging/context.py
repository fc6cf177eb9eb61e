"""Request-scoped logging context.

Every HTTP request gets a correlation id. The middleware binds it, together
with the request path and method, to structlog's context vars so that all log
entries written while the request is handled carry the same metadata.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog

CORRELATION_HEADER = "X-Correlation-ID"


def new_correlation_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[int] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind request metadata to every log entry emitted inside the block.

    Values left as None are not bound. The previous bindings of the same keys
    are dropped on exit, also when the block raises.

    Args:
        correlation_id: Request identifier, generated when missing.
        user_id: Id of the viewing account.
        request_path: Path of the request (e.g. "/node/1").
        request_method: HTTP method.
        **extra_context: Any further key-value pairs to bind.

    Yields:
        The correlation id in effect for the block.

    Example:
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
        ) as correlation_id:
            response = await call_next(request)
    """
    correlation_id = correlation_id or new_correlation_id()
    context = {
        key: value
        for key, value in {
            "user_id": user_id,
            "request_path": request_path,
            "request_method": request_method,
            **extra_context,
        }.items()
        if value is not None
    }
    context["correlation_id"] = correlation_id

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield correlation_id
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the request being handled, None outside a request."""
    return structlog.contextvars.get_contextvars().get("correlation_id")
