"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - CORRELATION_HEADER: Header carrying the correlation ID

Example:
    from infrastructure.logging import get_module_logger, bind_request_context

    logger = get_module_logger()

    with bind_request_context(correlation_id="req-123"):
        logger.info("group_page_rendered", group_id=1)
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    CORRELATION_HEADER,
    bind_request_context,
    get_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
]
