"""i18n system - translation catalogs and message interpolation.

Main components:
- models: Locale, TranslationKey, TranslationCatalog
- loader: YAMLTranslationLoader
- translator: Translator service with {{variable}} interpolation
"""

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.translator import Translator, create_translator

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "YAMLTranslationLoader",
    "Translator",
    "create_translator",
]
