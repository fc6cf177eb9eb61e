"""YAML translation loader.

Translation files live in one directory and are named
``<domain>.<locale>.yml``; every file for a locale is merged into a single
catalog.
"""

from pathlib import Path
from typing import Dict

import yaml

import structlog
from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger()


class YAMLTranslationLoader:
    """Loader for YAML-based translation files.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded catalogs by locale, when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a locale from ``*.<locale>.yml`` files.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        catalog = TranslationCatalog(locale=locale)
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue

            for namespace, messages in data.items():
                if not isinstance(messages, dict):
                    logger.warning(
                        "invalid_namespace_format",
                        namespace=namespace,
                        expected="dict",
                    )
                    continue
                catalog.merge_namespace(namespace, messages)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every locale that has at least one translation file.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "subscribe_formatter.en-US.yml" -> "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                try:
                    locales_found.add(Locale.from_string(parts[-1]))
                except ValueError:
                    continue

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}
