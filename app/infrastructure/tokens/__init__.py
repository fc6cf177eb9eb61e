"""Token replacement for administrator-configured text."""

from infrastructure.tokens.providers import create_token_service
from infrastructure.tokens.service import TOKEN_PATTERN, TokenProvider, TokenService

__all__ = ["TOKEN_PATTERN", "TokenProvider", "TokenService", "create_token_service"]
