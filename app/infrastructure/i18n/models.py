"""Translation models for the i18n system."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Locale(str, Enum):
    """Supported locale identifiers (IETF BCP 47 tags)."""

    EN_US = "en-US"
    FR_FR = "fr-FR"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        return self.value.split("-")[0]


@dataclass(frozen=True)
class TranslationKey:
    """Hierarchical translation key, e.g. ``subscribe_formatter.subscribe_message``.

    Attributes:
        namespace: Top-level namespace (e.g., "subscribe_formatter", "pages").
        message_key: Specific message identifier.
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2:
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """All translation messages for one locale, grouped by namespace.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict structure {namespace: {key: message_string}}.
    """

    locale: Locale
    messages: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        return self.messages.get(key.namespace, {}).get(key.message_key)

    def has_message(self, key: TranslationKey) -> bool:
        return key.message_key in self.messages.get(key.namespace, {})

    def merge_namespace(self, namespace: str, messages: Dict[str, str]) -> None:
        """Merge messages into a namespace. Later entries override earlier ones."""
        self.messages.setdefault(namespace, {}).update(messages)
