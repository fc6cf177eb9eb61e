"""Shared base classes for settings modules."""

from typing import Any, Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class AliasedSettings(BaseSettings):
    """Settings whose fields are read from upper-case environment aliases.

    Programmatic construction may use either the alias or the field name:
    ``OgSettings(role_permissions={...})`` and
    ``OgSettings(OG_ROLE_PERMISSIONS={...})`` are equivalent.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any):
        super().__init__(**self._aliased(kwargs))

    @classmethod
    def _aliased(cls, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        aliased = dict(kwargs)
        for name, field in cls.model_fields.items():
            if field.alias and name in aliased and field.alias not in aliased:
                aliased[field.alias] = aliased.pop(name)
        return aliased


class FeatureSettings(AliasedSettings):
    """Base class for feature settings (formatter defaults, group access)."""


class InfrastructureSettings(AliasedSettings):
    """Base class for infrastructure settings (server runtime, sessions)."""
