"""Fixtures for i18n tests."""

import pytest
import yaml

from infrastructure.i18n import Translator, YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with sample YAML files:

    - pages.en-US.yml
    - pages.fr-FR.yml
    - forms.en-US.yml
    """
    en_us_pages = {
        "pages": {
            "welcome": "Welcome to {{group_title}}",
            "goodbye": "Goodbye",
        }
    }
    with open(tmp_path / "pages.en-US.yml", "w") as f:
        yaml.dump(en_us_pages, f)

    fr_fr_pages = {"pages": {"welcome": "Bienvenue dans {{group_title}}"}}
    with open(tmp_path / "pages.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_pages, f, allow_unicode=True)

    en_us_forms = {"forms": {"save": "Save"}}
    with open(tmp_path / "forms.en-US.yml", "w") as f:
        yaml.dump(en_us_forms, f)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def translator(yaml_loader):
    translator = Translator(yaml_loader)
    translator.load_all()
    return translator
