"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator, create_translator
from infrastructure.tokens import TokenService, create_token_service
from modules.og import EntityStorage, MembershipManager, OgAccess
from modules.subscribe import FormatterSettings, FormatterSettingsStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep

        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """Translator with every bundled locale loaded."""
    return create_translator()


@lru_cache
def get_token_service() -> TokenService:
    """Token service with account, entity and site providers registered."""
    settings = get_settings()
    return create_token_service(settings.SITE_NAME, settings.server.BACKEND_URL)


@lru_cache
def get_entity_storage() -> EntityStorage:
    return EntityStorage()


@lru_cache
def get_membership_manager() -> MembershipManager:
    return MembershipManager()


@lru_cache
def get_og_access() -> OgAccess:
    """Group access evaluator bound to the shared membership manager."""
    return OgAccess(get_settings().og, get_membership_manager())


@lru_cache
def get_formatter_settings_store() -> FormatterSettingsStore:
    """Settings store seeded with the site-wide message defaults.

    Returns:
        FormatterSettingsStore: Store whose initial values come from the
        OG_*_MESSAGE environment variables, or the built-in defaults.
    """
    initial = FormatterSettings.from_site_defaults(get_settings().subscribe)
    return FormatterSettingsStore(initial)


def reset_providers() -> None:
    """Drop every cached singleton (used by tests and app factories)."""
    for provider in (
        get_settings,
        get_translator,
        get_token_service,
        get_entity_storage,
        get_membership_manager,
        get_og_access,
        get_formatter_settings_store,
    ):
        provider.cache_clear()
