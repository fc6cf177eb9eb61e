"""Infrastructure modules for the groups application.

Centralized infrastructure components:
- configuration: Settings management (settings, OgSettings, SubscribeFormatterSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Internationalization
- tokens: Token replacement for configurable text
- routing: Named-route URL generation and redirect destinations
- services: Dependency injection services (SettingsDep, get_settings, ...)
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
]
