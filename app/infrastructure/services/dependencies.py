"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from infrastructure.routing import RedirectDestination, UrlGenerator
from infrastructure.tokens import TokenService
from infrastructure.services.providers import (
    get_entity_storage,
    get_formatter_settings_store,
    get_membership_manager,
    get_og_access,
    get_settings,
    get_token_service,
    get_translator,
)
from modules.og import EntityStorage, MembershipManager, OgAccess
from modules.subscribe import FormatterSettingsStore


def get_url_generator(request: Request) -> UrlGenerator:
    """URL generator over the routes of the running application."""
    return UrlGenerator.from_request(request)


def get_redirect_destination(request: Request) -> RedirectDestination:
    return RedirectDestination(request)


SettingsDep = Annotated[Settings, Depends(get_settings)]
TranslatorDep = Annotated[Translator, Depends(get_translator)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
EntityStorageDep = Annotated[EntityStorage, Depends(get_entity_storage)]
MembershipManagerDep = Annotated[MembershipManager, Depends(get_membership_manager)]
OgAccessDep = Annotated[OgAccess, Depends(get_og_access)]
FormatterSettingsStoreDep = Annotated[
    FormatterSettingsStore, Depends(get_formatter_settings_store)
]
UrlGeneratorDep = Annotated[UrlGenerator, Depends(get_url_generator)]
RedirectDestinationDep = Annotated[
    RedirectDestination, Depends(get_redirect_destination)
]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "TokenServiceDep",
    "EntityStorageDep",
    "MembershipManagerDep",
    "OgAccessDep",
    "FormatterSettingsStoreDep",
    "UrlGeneratorDep",
    "RedirectDestinationDep",
    "get_url_generator",
    "get_redirect_destination",
]
