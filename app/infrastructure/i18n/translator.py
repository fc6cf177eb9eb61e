"""Translation service for retrieving and interpolating translated messages."""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from infrastructure.logging import get_module_logger
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationKey

logger = get_module_logger()

LOCALES_DIR = Path(__file__).parent / "locales"

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


class Translator:
    """Translates messages with ``{{variable}}`` interpolation.

    Attributes:
        loader: YAMLTranslationLoader for loading translation files.
        catalogs: Loaded TranslationCatalogs by locale.
        fallback_locale: Locale to use when key not found.
    """

    def __init__(
        self,
        loader: YAMLTranslationLoader,
        fallback_locale: Locale = Locale.EN_US,
    ):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Falls back to fallback_locale if key not found in requested locale.

        Raises:
            KeyError: If key not found in requested locale or fallback locale.
            ValueError: If the message references a variable that was not given.
        """
        variables = variables or {}

        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if not message and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )

        if not message:
            logger.error(
                "translation_not_found",
                key=str(key),
                locale=locale.value,
                fallback_locale=self.fallback_locale.value,
            )
            raise KeyError(
                f"Translation not found for key {key} in {locale.value} or fallback {self.fallback_locale.value}"
            )

        return self._interpolate(message, variables)

    def translate(
        self,
        key: Union[str, TranslationKey],
        locale: Union[str, Locale] = Locale.EN_US,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Convenience wrapper accepting dotted keys and locale strings.

        Unsupported locale strings resolve to the fallback locale.
        """
        if isinstance(key, str):
            key = TranslationKey.from_string(key)
        if isinstance(locale, str):
            try:
                locale = Locale.from_string(locale)
            except ValueError:
                locale = self.fallback_locale
        return self.translate_message(key, locale, variables)

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{name}}`` placeholders with values from variables.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        for var_name in PLACEHOLDER_PATTERN.findall(message):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        return PLACEHOLDER_PATTERN.sub(
            lambda match: str(variables[match.group(1)]), message
        )


def create_translator(translations_dir: Optional[Path] = None) -> Translator:
    """Build a Translator with every bundled locale loaded."""
    translator = Translator(YAMLTranslationLoader(translations_dir or LOCALES_DIR))
    translator.load_all()
    return translator
