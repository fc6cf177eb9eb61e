"""Group subscribe formatter: call-to-action links for group membership."""

from modules.subscribe.formatter import GroupSubscribeExtendedFormatter
from modules.subscribe.outcomes import (
    ClosedNotice,
    ManagerNotice,
    NoOutput,
    OutcomeKind,
    RequestLink,
    SubscribeLink,
    SubscribeOutcome,
    UnsubscribeLink,
)
from modules.subscribe.rendering import render_html
from modules.subscribe.resolver import resolve_subscribe_outcome
from modules.subscribe.settings import (
    SETTING_NAMES,
    FormatterSettings,
    FormatterSettingsStore,
)

__all__ = [
    "GroupSubscribeExtendedFormatter",
    "ClosedNotice",
    "ManagerNotice",
    "NoOutput",
    "OutcomeKind",
    "RequestLink",
    "SubscribeLink",
    "SubscribeOutcome",
    "UnsubscribeLink",
    "render_html",
    "resolve_subscribe_outcome",
    "SETTING_NAMES",
    "FormatterSettings",
    "FormatterSettingsStore",
]
