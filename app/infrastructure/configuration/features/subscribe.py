"""Subscribe formatter feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SubscribeFormatterSettings(FeatureSettings):
    """Site-wide defaults for the group subscribe formatter.

    These values seed the formatter's default settings. Administrators can
    still override each message per display through the settings form.

    Environment Variables:
        OG_SUBSCRIBE_MESSAGE: Link text when the viewer can join directly
        OG_UNSUBSCRIBE_MESSAGE: Link text for active or pending members
        OG_REQUEST_SUBSCRIPTION_MESSAGE: Link text when approval is required
        OG_CLOSED_GROUP_MESSAGE: Notice shown when the viewer cannot join
        OG_MANAGER_MESSAGE: Notice shown to the group owner
        OG_FORMATTER_LOCALE: Locale used for the settings form titles

    Example:
        ```python
        from infrastructure.services import get_settings

        defaults = get_settings().subscribe.as_defaults()
        ```
    """

    subscribe_message: str = Field(
        default="Subscribe to group",
        alias="OG_SUBSCRIBE_MESSAGE",
    )
    unsubscribe_message: str = Field(
        default="Unsubscribe from group",
        alias="OG_UNSUBSCRIBE_MESSAGE",
    )
    request_subscription_message: str = Field(
        default="Request group membership",
        alias="OG_REQUEST_SUBSCRIPTION_MESSAGE",
    )
    closed_group_message: str = Field(
        default="This is a closed group. Only a group administrator can add you.",
        alias="OG_CLOSED_GROUP_MESSAGE",
    )
    manager_message: str = Field(
        default="You are the group manager",
        alias="OG_MANAGER_MESSAGE",
    )
    locale: str = Field(default="en-US", alias="OG_FORMATTER_LOCALE")

    def as_defaults(self) -> dict[str, str]:
        """Return the five message templates keyed by setting name."""
        return {
            "subscribe_message": self.subscribe_message,
            "unsubscribe_message": self.unsubscribe_message,
            "request_subscription_message": self.request_subscription_message,
            "closed_group_message": self.closed_group_message,
            "manager_message": self.manager_message,
        }
