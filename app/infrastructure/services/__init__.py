"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    EntityStorageDep,
    FormatterSettingsStoreDep,
    MembershipManagerDep,
    OgAccessDep,
    RedirectDestinationDep,
    SettingsDep,
    TokenServiceDep,
    TranslatorDep,
    UrlGeneratorDep,
)
from infrastructure.services.providers import (
    get_entity_storage,
    get_formatter_settings_store,
    get_membership_manager,
    get_og_access,
    get_settings,
    get_token_service,
    get_translator,
    reset_providers,
)

__all__ = [
    "EntityStorageDep",
    "FormatterSettingsStoreDep",
    "MembershipManagerDep",
    "OgAccessDep",
    "RedirectDestinationDep",
    "SettingsDep",
    "TokenServiceDep",
    "TranslatorDep",
    "UrlGeneratorDep",
    "get_entity_storage",
    "get_formatter_settings_store",
    "get_membership_manager",
    "get_og_access",
    "get_settings",
    "get_token_service",
    "get_translator",
    "reset_providers",
]
