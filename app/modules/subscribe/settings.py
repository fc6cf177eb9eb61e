"""Formatter settings: the five message templates and their settings form."""

import threading
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.configuration import SubscribeFormatterSettings
from infrastructure.i18n import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SETTING_NAMES = (
    "subscribe_message",
    "unsubscribe_message",
    "request_subscription_message",
    "closed_group_message",
    "manager_message",
)


class FormatterSettings(BaseModel):
    """Message templates of the group subscribe formatter.

    Each value may contain ``[type:name]`` tokens which are replaced when the
    formatter renders.
    """

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    subscribe_message: str = Field(default="Subscribe to group")
    unsubscribe_message: str = Field(default="Unsubscribe from group")
    request_subscription_message: str = Field(default="Request group membership")
    closed_group_message: str = Field(
        default="This is a closed group. Only a group administrator can add you."
    )
    manager_message: str = Field(default="You are the group manager")

    @classmethod
    def from_site_defaults(
        cls, site_defaults: SubscribeFormatterSettings
    ) -> "FormatterSettings":
        return cls(**site_defaults.as_defaults())

    def get(self, name: str) -> str:
        if name not in SETTING_NAMES:
            raise KeyError(f"Unknown formatter setting: {name}")
        return getattr(self, name)


class FormatterSettingsUpdate(BaseModel):
    """Partial update submitted through the settings form."""

    model_config = ConfigDict(extra="forbid", strict=True)

    subscribe_message: Optional[str] = None
    unsubscribe_message: Optional[str] = None
    request_subscription_message: Optional[str] = None
    closed_group_message: Optional[str] = None
    manager_message: Optional[str] = None


def build_settings_form(
    current: FormatterSettings, translator: Translator, locale: str
) -> Dict[str, Dict[str, Any]]:
    """Settings form definition: one text field per message template."""
    return {
        name: {
            "title": translator.translate(f"subscribe_formatter.{name}", locale),
            "type": "textfield",
            "default_value": current.get(name),
        }
        for name in SETTING_NAMES
    }


class FormatterSettingsStore:
    """Holds the configured settings for the formatter display."""

    def __init__(self, initial: Optional[FormatterSettings] = None):
        self._lock = threading.Lock()
        self._initial = initial or FormatterSettings()
        self._current = self._initial

    def get(self) -> FormatterSettings:
        return self._current

    def update(self, values: Mapping[str, Any]) -> FormatterSettings:
        """Merge new values into the stored settings.

        Raises:
            pydantic.ValidationError: On unknown keys or non-string values.
        """
        changes = FormatterSettingsUpdate.model_validate(dict(values)).model_dump(
            exclude_none=True
        )
        with self._lock:
            self._current = self._current.model_copy(update=changes)
            updated = self._current
        logger.info("formatter_settings_updated", changed=sorted(changes))
        return updated

    def reset(self) -> FormatterSettings:
        with self._lock:
            self._current = self._initial
        logger.info("formatter_settings_reset")
        return self._current
