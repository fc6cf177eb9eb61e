"""Decides which subscribe call-to-action a viewer gets for a group."""

from infrastructure.logging import get_module_logger
from modules.og.access import SUBSCRIBE, SUBSCRIBE_WITHOUT_APPROVAL
from modules.og.domain import MembershipState
from modules.subscribe.contracts import (
    DestinationProvider,
    GroupAccessEvaluator,
    GroupLike,
    MembershipQuery,
    UrlBuilder,
    ViewerLike,
)
from modules.subscribe.outcomes import (
    ClosedNotice,
    ManagerNotice,
    NoOutput,
    RequestLink,
    SubscribeLink,
    SubscribeOutcome,
    UnsubscribeLink,
)

logger = get_module_logger()

ROUTE_SUBSCRIBE = "og.subscribe"
ROUTE_UNSUBSCRIBE = "og.unsubscribe"
ROUTE_LOGIN = "user.login"

MEMBER_STATES = (MembershipState.ACTIVE, MembershipState.PENDING)


def resolve_subscribe_outcome(
    group: GroupLike,
    viewer: ViewerLike,
    *,
    memberships: MembershipQuery,
    access: GroupAccessEvaluator,
    urls: UrlBuilder,
    destination: DestinationProvider,
) -> SubscribeOutcome:
    """Return the outcome for a viewer looking at a group.

    The first matching rule wins:

    1. the viewer owns the group: manager notice
    2. the viewer is blocked: nothing
    3. the viewer is an active or pending member: unsubscribe link
    4. otherwise, with the subscribe route (or, for anonymous viewers, the
       login route with a destination back to this page) as target:
       subscribe link when "subscribe without approval" is allowed,
       request link when "subscribe" is allowed, closed notice otherwise
    """
    outcome = _decide(group, viewer, memberships, access, urls, destination)
    logger.debug(
        "subscribe_outcome_resolved",
        entity_type_id=group.entity_type_id,
        group_id=group.id,
        user_id=viewer.id,
        outcome=outcome.kind.value,
    )
    return outcome


def _decide(
    group: GroupLike,
    viewer: ViewerLike,
    memberships: MembershipQuery,
    access: GroupAccessEvaluator,
    urls: UrlBuilder,
    destination: DestinationProvider,
) -> SubscribeOutcome:
    if group.owner_id is not None and group.owner_id == viewer.id:
        return ManagerNotice()

    if memberships.is_member_blocked(group, viewer):
        return NoOutput()

    route_params = {"entity_type_id": group.entity_type_id, "group": group.id}

    if memberships.is_member(group, viewer, MEMBER_STATES):
        return UnsubscribeLink(url=urls.url_for(ROUTE_UNSUBSCRIBE, route_params))

    if viewer.is_authenticated:
        url = urls.url_for(ROUTE_SUBSCRIBE, route_params)
    else:
        url = urls.url_for(ROUTE_LOGIN, query=destination.get_as_array())

    if access.user_access(group, SUBSCRIBE_WITHOUT_APPROVAL, viewer).is_allowed:
        return SubscribeLink(url=url)

    if access.user_access(group, SUBSCRIBE, viewer).is_allowed:
        return RequestLink(url=url)

    return ClosedNotice()
