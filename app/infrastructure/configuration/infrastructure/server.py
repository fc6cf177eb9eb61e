"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and session configuration.

    Environment Variables:
        BACKEND_URL: Public base URL of the site (default: http://127.0.0.1:8000)
        SESSION_SECRET_KEY: Secret used to sign the session cookie
        SESSION_COOKIE_NAME: Name of the session cookie
        SESSION_MAX_AGE_MINUTES: Lifetime of a login session
        LOGIN_RATE_LIMIT: slowapi limit string for login attempts

    Example:
        ```python
        from infrastructure.configuration import settings

        cookie_name = settings.server.SESSION_COOKIE_NAME
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    SECRET_KEY: str = Field(
        default="change-me-in-production", alias="SESSION_SECRET_KEY"
    )
    SESSION_COOKIE_NAME: str = Field(default="og_session", alias="SESSION_COOKIE_NAME")
    SESSION_MAX_AGE_MINUTES: int = Field(
        default=1440, alias="SESSION_MAX_AGE_MINUTES"
    )
    LOGIN_RATE_LIMIT: str = Field(default="20/minute", alias="LOGIN_RATE_LIMIT")
