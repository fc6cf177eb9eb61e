"""Unit tests for infrastructure.configuration.

Tests cover:
- Settings aggregation and defaults
- OgSettings parsing of OG_ROLE_PERMISSIONS
- SubscribeFormatterSettings environment overrides
"""

import json

import pytest
from pydantic import ValidationError

from infrastructure.configuration import (
    OgSettings,
    Settings,
    SubscribeFormatterSettings,
)
from infrastructure.configuration.infrastructure import ServerSettings


class TestSettings:
    def test_subsettings_are_instantiated(self):
        settings = Settings()
        assert isinstance(settings.og, OgSettings)
        assert isinstance(settings.subscribe, SubscribeFormatterSettings)
        assert isinstance(settings.server, ServerSettings)

    def test_is_production_follows_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_site_name_override(self, monkeypatch):
        monkeypatch.setenv("SITE_NAME", "Community")
        assert Settings().SITE_NAME == "Community"


class TestServerSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SESSION_COOKIE_NAME", raising=False)
        server = ServerSettings()
        assert server.SESSION_COOKIE_NAME == "og_session"
        assert server.SESSION_MAX_AGE_MINUTES == 1440
        assert server.LOGIN_RATE_LIMIT == "20/minute"

    def test_secret_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("SESSION_SECRET_KEY", "s3cret")
        assert ServerSettings().SECRET_KEY == "s3cret"

    def test_field_name_and_alias_are_equivalent(self):
        assert ServerSettings(SECRET_KEY="a").SECRET_KEY == "a"
        assert ServerSettings(SESSION_SECRET_KEY="b").SECRET_KEY == "b"


class TestSubscribeFormatterSettings:
    def test_defaults(self):
        defaults = SubscribeFormatterSettings().as_defaults()
        assert defaults["subscribe_message"] == "Subscribe to group"
        assert defaults["request_subscription_message"] == "Request group membership"
        assert len(defaults) == 5

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("OG_SUBSCRIBE_MESSAGE", "Join [node:title]")
        monkeypatch.setenv("OG_FORMATTER_LOCALE", "fr-FR")
        settings = SubscribeFormatterSettings()
        assert settings.subscribe_message == "Join [node:title]"
        assert settings.locale == "fr-FR"


class TestOgSettings:
    def test_defaults(self):
        og = OgSettings()
        assert og.role_permissions == {}
        assert og.group_manager_full_access is True
        assert og.default_non_member_permissions == ["subscribe"]

    def test_role_permissions_from_json_env(self, monkeypatch):
        monkeypatch.setenv(
            "OG_ROLE_PERMISSIONS",
            json.dumps({"node.group": {"non-member": ["subscribe without approval"]}}),
        )
        og = OgSettings()
        assert og.permissions_for("node", "group", "non-member") == [
            "subscribe without approval"
        ]

    def test_role_permissions_from_quoted_json(self):
        og = OgSettings(role_permissions='\'{"node.club": {"member": ["post"]}}\'')
        assert og.permissions_for("node", "club", "member") == ["post"]

    def test_invalid_json_raises(self):
        with pytest.raises(ValidationError):
            OgSettings(role_permissions="{not json")

    def test_bundle_key_requires_entity_type(self):
        with pytest.raises(ValidationError):
            OgSettings(role_permissions={"group": {"member": []}})

    def test_unconfigured_bundle_uses_defaults(self):
        og = OgSettings(default_non_member_permissions=["subscribe", "view"])
        assert og.permissions_for("node", "group", "non-member") == ["subscribe", "view"]
        assert og.permissions_for("node", "group", "member") == []

    def test_configured_bundle_missing_role(self):
        og = OgSettings(role_permissions={"node.group": {"member": ["post"]}})
        assert og.permissions_for("node", "group", "non-member") == []
