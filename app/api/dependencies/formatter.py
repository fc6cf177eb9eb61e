"""Request-scoped construction of the group subscribe formatter."""

from typing import Annotated

from fastapi import Depends

from infrastructure.services import (
    FormatterSettingsStoreDep,
    MembershipManagerDep,
    OgAccessDep,
    RedirectDestinationDep,
    TokenServiceDep,
    TranslatorDep,
    UrlGeneratorDep,
)
from api.dependencies.session import CurrentAccountDep
from modules.subscribe import GroupSubscribeExtendedFormatter


def get_subscribe_formatter(
    account: CurrentAccountDep,
    store: FormatterSettingsStoreDep,
    og_access: OgAccessDep,
    memberships: MembershipManagerDep,
    urls: UrlGeneratorDep,
    tokens: TokenServiceDep,
    destination: RedirectDestinationDep,
    translator: TranslatorDep,
) -> GroupSubscribeExtendedFormatter:
    return GroupSubscribeExtendedFormatter.create(
        {
            "current_user": account,
            "og.access": og_access,
            "og.membership_manager": memberships,
            "url_generator": urls,
            "token": tokens,
            "redirect.destination": destination,
            "translator": translator,
        },
        {"settings": store.get()},
    )


SubscribeFormatterDep = Annotated[
    GroupSubscribeExtendedFormatter, Depends(get_subscribe_formatter)
]
