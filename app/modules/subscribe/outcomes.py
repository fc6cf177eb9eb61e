"""Render outcomes of the subscribe formatter.

Exactly one outcome is produced per render. Each outcome names the setting
holding its text and the CSS classes of the element it renders to; link
outcomes also carry their target URL.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from infrastructure.routing import Url


class OutcomeKind(str, Enum):
    MANAGER = "manager"
    EMPTY = "empty"
    UNSUBSCRIBE = "unsubscribe"
    SUBSCRIBE = "subscribe"
    REQUEST = "request"
    CLOSED = "closed"


@dataclass(frozen=True)
class ManagerNotice:
    """The viewer owns the group."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.MANAGER
    message_setting: ClassVar[Optional[str]] = "manager_message"
    css_classes: ClassVar[Tuple[str, ...]] = ("group", "manager")


@dataclass(frozen=True)
class NoOutput:
    """The viewer is blocked; nothing is rendered."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.EMPTY
    message_setting: ClassVar[Optional[str]] = None
    css_classes: ClassVar[Tuple[str, ...]] = ()


@dataclass(frozen=True)
class UnsubscribeLink:
    """The viewer has an active or pending membership."""

    url: Url
    kind: ClassVar[OutcomeKind] = OutcomeKind.UNSUBSCRIBE
    message_setting: ClassVar[Optional[str]] = "unsubscribe_message"
    css_classes: ClassVar[Tuple[str, ...]] = ("group", "unsubscribe")


@dataclass(frozen=True)
class SubscribeLink:
    """The viewer may join without approval."""

    url: Url
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUBSCRIBE
    message_setting: ClassVar[Optional[str]] = "subscribe_message"
    css_classes: ClassVar[Tuple[str, ...]] = ("group", "subscribe")


@dataclass(frozen=True)
class RequestLink:
    """The viewer may ask to join; an administrator must approve."""

    url: Url
    kind: ClassVar[OutcomeKind] = OutcomeKind.REQUEST
    message_setting: ClassVar[Optional[str]] = "request_subscription_message"
    css_classes: ClassVar[Tuple[str, ...]] = ("group", "subscribe", "request")


@dataclass(frozen=True)
class ClosedNotice:
    """The viewer may not join."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.CLOSED
    message_setting: ClassVar[Optional[str]] = "closed_group_message"
    css_classes: ClassVar[Tuple[str, ...]] = ("group", "closed")


SubscribeOutcome = Union[
    ManagerNotice, NoOutput, UnsubscribeLink, SubscribeLink, RequestLink, ClosedNotice
]

LINK_OUTCOMES = (UnsubscribeLink, SubscribeLink, RequestLink)
