import pytest

from modules.og import SUBSCRIBE, SUBSCRIBE_WITHOUT_APPROVAL
from modules.og.domain import MembershipState
from modules.subscribe import (
    ClosedNotice,
    ManagerNotice,
    NoOutput,
    OutcomeKind,
    RequestLink,
    SubscribeLink,
    UnsubscribeLink,
    resolve_subscribe_outcome,
)
from tests.factories import make_account, make_anonymous, make_group


@pytest.fixture
def group():
    return make_group(id=7, owner_id=1)


@pytest.fixture
def resolve(memberships, access, urls, destination):
    def _resolve(group, viewer):
        return resolve_subscribe_outcome(
            group,
            viewer,
            memberships=memberships,
            access=access,
            urls=urls,
            destination=destination,
        )

    return _resolve


@pytest.mark.unit
class TestManagerBranch:
    def test_owner_gets_manager_notice(self, resolve, group):
        outcome = resolve(group, make_account(id=1, name="alice"))
        assert isinstance(outcome, ManagerNotice)
        assert outcome.kind == OutcomeKind.MANAGER

    def test_owner_wins_over_blocked_membership(self, resolve, group, memberships):
        owner = make_account(id=1, name="alice")
        memberships.add(owner, MembershipState.BLOCKED)
        assert isinstance(resolve(group, owner), ManagerNotice)

    def test_owner_wins_without_any_access(self, resolve, group, access):
        resolve(group, make_account(id=1, name="alice"))
        assert access.calls == []

    def test_group_without_owner_never_shows_manager(self, resolve, access):
        orphan = make_group(owner_id=None)
        access.allowed = {SUBSCRIBE}
        assert isinstance(resolve(orphan, make_anonymous()), RequestLink)


@pytest.mark.unit
class TestMemberBranches:
    def test_blocked_member_gets_nothing(self, resolve, group, memberships, access):
        bob = make_account()
        memberships.add(bob, MembershipState.BLOCKED)
        access.allowed = {SUBSCRIBE, SUBSCRIBE_WITHOUT_APPROVAL}
        assert isinstance(resolve(group, bob), NoOutput)

    @pytest.mark.parametrize(
        "state", [MembershipState.ACTIVE, MembershipState.PENDING]
    )
    def test_member_gets_unsubscribe_link(self, resolve, group, memberships, state):
        bob = make_account()
        memberships.add(bob, state)
        outcome = resolve(group, bob)
        assert isinstance(outcome, UnsubscribeLink)
        assert outcome.url.route_name == "og.unsubscribe"
        assert str(outcome.url) == "/group/node/7/unsubscribe"


@pytest.mark.unit
class TestNonMemberBranches:
    def test_subscribe_without_approval(self, resolve, group, access):
        access.allowed = {SUBSCRIBE_WITHOUT_APPROVAL, SUBSCRIBE}
        outcome = resolve(group, make_account())
        assert isinstance(outcome, SubscribeLink)
        assert str(outcome.url) == "/group/node/7/subscribe"

    def test_subscribe_with_approval(self, resolve, group, access):
        access.allowed = {SUBSCRIBE}
        outcome = resolve(group, make_account())
        assert isinstance(outcome, RequestLink)
        assert outcome.url.route_name == "og.subscribe"
        assert access.calls == [SUBSCRIBE_WITHOUT_APPROVAL, SUBSCRIBE]

    def test_closed_group(self, resolve, group):
        assert isinstance(resolve(group, make_account()), ClosedNotice)

    def test_anonymous_link_goes_to_login(self, resolve, group, access):
        access.allowed = {SUBSCRIBE_WITHOUT_APPROVAL}
        outcome = resolve(group, make_anonymous())
        assert isinstance(outcome, SubscribeLink)
        assert outcome.url.route_name == "user.login"
        assert outcome.url.query_args == {"destination": "/node/1"}
        assert str(outcome.url) == "/user/login?destination=%2Fnode%2F1"

    def test_anonymous_request_link_keeps_query_string(
        self, resolve, group, access, destination
    ):
        destination.destination = "/node/7?page=2"
        access.allowed = {SUBSCRIBE}
        outcome = resolve(group, make_anonymous())
        assert isinstance(outcome, RequestLink)
        assert outcome.url.query_args["destination"] == "/node/7?page=2"

    def test_anonymous_closed_group(self, resolve, group):
        assert isinstance(resolve(group, make_anonymous()), ClosedNotice)
