"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    OgSettings: Group access settings class (for testing)
    SubscribeFormatterSettings: Formatter defaults settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    subscribe_text = settings.subscribe.subscribe_message
    permissions = settings.og.permissions_for("node", "group", "non-member")

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import (
    OgSettings,
    SubscribeFormatterSettings,
)

__all__ = ["Settings", "settings", "OgSettings", "SubscribeFormatterSettings"]
