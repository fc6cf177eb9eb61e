"""Administration of the group subscribe formatter settings."""

from typing import Any, Dict, Optional

from fastapi import APIRouter

from api.dependencies.formatter import SubscribeFormatterDep
from api.dependencies.session import CurrentAccountDep, require_permission
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    FormatterSettingsStoreDep,
    SettingsDep,
    TranslatorDep,
)
from modules.subscribe import GroupSubscribeExtendedFormatter
from modules.subscribe.settings import FormatterSettingsUpdate

logger = get_module_logger()
router = APIRouter(prefix="/admin/formatters", tags=["Administration"])

ADMINISTER_SITE_CONFIGURATION = "administer site configuration"
SETTINGS_PATH = f"/{GroupSubscribeExtendedFormatter.PLUGIN_ID}"


@router.get(SETTINGS_PATH, name="formatter.settings")
def get_formatter_settings(
    account: CurrentAccountDep,
    formatter: SubscribeFormatterDep,
    translator: TranslatorDep,
    settings: SettingsDep,
    locale: Optional[str] = None,
) -> Dict[str, Any]:
    """Localized settings form together with the stored values.

    The form is shown in OG_FORMATTER_LOCALE unless ``locale`` is given.
    """
    require_permission(account, ADMINISTER_SITE_CONFIGURATION)
    locale = locale or settings.subscribe.locale
    return {
        "plugin_id": formatter.PLUGIN_ID,
        "label": translator.translate("subscribe_formatter.label", locale),
        "description": translator.translate("subscribe_formatter.description", locale),
        "form": formatter.settings_form(locale),
        "settings": {
            name: formatter.get_setting(name)
            for name in formatter.default_settings()
        },
    }


@router.put(SETTINGS_PATH, name="formatter.settings")
def update_formatter_settings(
    update: FormatterSettingsUpdate,
    account: CurrentAccountDep,
    store: FormatterSettingsStoreDep,
) -> Dict[str, Any]:
    """Store new message templates. Omitted fields keep their value."""
    require_permission(account, ADMINISTER_SITE_CONFIGURATION)
    updated = store.update(update.model_dump(exclude_none=True))
    logger.info("formatter_settings_saved", user_id=account.id)
    return {"settings": updated.model_dump()}
