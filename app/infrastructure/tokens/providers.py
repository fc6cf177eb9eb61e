"""Built-in token providers for accounts, group entities and the site."""

from typing import Any, Optional

from infrastructure.tokens.service import TokenService


def account_tokens(name: str, account: Any) -> Optional[str]:
    """Tokens for [current-user:*] and [user:*]."""
    if account is None:
        return None
    if name == "id":
        return str(account.id)
    if name in ("name", "display-name", "account-name"):
        return account.name
    if name == "mail":
        return account.email or ""
    return None


def entity_tokens(name: str, entity: Any) -> Optional[str]:
    """Tokens for [node:*] and [group:*]."""
    if entity is None:
        return None
    if name in ("id", "nid"):
        return str(entity.id)
    if name == "title":
        return entity.title
    if name in ("type", "bundle"):
        return entity.bundle
    if name == "url":
        return entity.canonical_path
    if name == "author:id" and entity.owner_id is not None:
        return str(entity.owner_id)
    return None


def site_tokens(site_name: str, base_url: str):
    """Build the provider for [site:*] tokens."""

    def _provider(name: str, _subject: Any) -> Optional[str]:
        if name == "name":
            return site_name
        if name == "url":
            return base_url
        return None

    return _provider


def create_token_service(site_name: str, base_url: str) -> TokenService:
    """TokenService with the default providers registered."""
    service = TokenService()
    service.register("current-user", account_tokens)
    service.register("user", account_tokens)
    service.register("node", entity_tokens)
    service.register("group", entity_tokens)
    service.register("site", site_tokens(site_name, base_url), needs_data=False)
    return service
