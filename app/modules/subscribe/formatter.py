"""Group subscribe formatter.

Renders the call-to-action for a group: a subscribe, request or
unsubscribe link, a closed-group or manager notice, or nothing for blocked
members. Message texts come from the formatter settings and go through
token replacement before rendering.
"""

from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n import Translator
from infrastructure.logging import get_module_logger
from modules.subscribe.contracts import (
    DestinationProvider,
    GroupAccessEvaluator,
    MembershipQuery,
    TokenReplacer,
    UrlBuilder,
)
from modules.subscribe.outcomes import (
    LINK_OUTCOMES,
    ManagerNotice,
    NoOutput,
    SubscribeOutcome,
)
from modules.subscribe.resolver import ROUTE_LOGIN, resolve_subscribe_outcome
from modules.subscribe.settings import (
    FormatterSettings,
    build_settings_form,
)

logger = get_module_logger()

CACHE_CONTEXT_MEMBERSHIP = "og_membership_state"
CACHE_CONTEXT_USER = "user"
CACHE_CONTEXT_URL = "url"


class GroupSubscribeExtendedFormatter:
    """Formatter for the "og_group" field of group entities.

    Attributes:
        PLUGIN_ID: Identifier of the formatter
        FIELD_TYPES: Field types the formatter applies to
    """

    PLUGIN_ID = "og_group_subscribe_extended"
    FIELD_TYPES = ("og_group",)

    def __init__(
        self,
        settings: FormatterSettings,
        *,
        current_user: Any,
        og_access: GroupAccessEvaluator,
        memberships: MembershipQuery,
        urls: UrlBuilder,
        tokens: TokenReplacer,
        destination: DestinationProvider,
        translator: Optional[Translator] = None,
    ):
        self._settings = settings
        self._current_user = current_user
        self._og_access = og_access
        self._memberships = memberships
        self._urls = urls
        self._tokens = tokens
        self._destination = destination
        self._translator = translator

    @classmethod
    def create(
        cls, container: Mapping[str, Any], configuration: Mapping[str, Any]
    ) -> "GroupSubscribeExtendedFormatter":
        """Build the formatter from a service mapping and its configuration.

        ``container`` must provide "current_user", "og.access",
        "og.membership_manager", "url_generator", "token", "redirect.destination"
        and may provide "translator". ``configuration`` may provide "settings".
        """
        settings = configuration.get("settings")
        if not isinstance(settings, FormatterSettings):
            settings = FormatterSettings(**(settings or {}))
        return cls(
            settings,
            current_user=container["current_user"],
            og_access=container["og.access"],
            memberships=container["og.membership_manager"],
            urls=container["url_generator"],
            tokens=container["token"],
            destination=container["redirect.destination"],
            translator=container.get("translator"),
        )

    @staticmethod
    def default_settings() -> Dict[str, str]:
        return FormatterSettings().model_dump()

    def get_setting(self, name: str) -> str:
        return self._settings.get(name)

    def settings_form(self, locale: str = "en-US") -> Dict[str, Dict[str, Any]]:
        """Administrator form for the five message templates.

        Raises:
            RuntimeError: If the formatter was built without a translator.
        """
        if self._translator is None:
            raise RuntimeError("settings_form requires a translator")
        return build_settings_form(self._settings, self._translator, locale)

    def resolve(self, group: Any) -> SubscribeOutcome:
        return resolve_subscribe_outcome(
            group,
            self._current_user,
            memberships=self._memberships,
            access=self._og_access,
            urls=self._urls,
            destination=self._destination,
        )

    def view_elements(self, group: Any) -> Dict[str, Any]:
        """Build the render array for a group.

        Returns:
            {"cache": {"contexts": [...]}, "items": [element]} where items is
            empty when nothing should be displayed.
        """
        outcome = self.resolve(group)
        build: Dict[str, Any] = {
            "cache": {"contexts": self._cache_contexts(outcome)},
            "items": [],
        }

        if isinstance(outcome, NoOutput):
            return build

        message = self.get_string_setting(outcome.message_setting, group)
        attributes = {"title": message, "class": list(outcome.css_classes)}

        if isinstance(outcome, LINK_OUTCOMES):
            # A blank link text means the administrator hid this link
            if not message:
                return build
            build["items"].append(
                {
                    "type": "link",
                    "title": message,
                    "url": str(outcome.url),
                    "attributes": attributes,
                }
            )
        else:
            build["items"].append(
                {
                    "type": "html_tag",
                    "tag": "span",
                    "attributes": attributes,
                    "value": message,
                }
            )
        return build

    def get_string_setting(self, name: str, group: Any = None) -> str:
        """Setting value with tokens replaced for the current request."""
        data: Dict[str, Any] = {"current-user": self._current_user}
        if group is not None:
            data["group"] = group
            data[group.entity_type_id] = group
        return self._tokens.replace(self.get_setting(name), data)

    def _cache_contexts(self, outcome: SubscribeOutcome) -> List[str]:
        contexts = [CACHE_CONTEXT_MEMBERSHIP]
        if isinstance(outcome, ManagerNotice):
            contexts.append(CACHE_CONTEXT_USER)
        elif (
            isinstance(outcome, LINK_OUTCOMES)
            and outcome.url.route_name == ROUTE_LOGIN
        ):
            contexts.append(CACHE_CONTEXT_URL)
        return contexts
