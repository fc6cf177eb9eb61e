import pytest

from modules.og import MembershipManager
from modules.og.domain import MembershipError, MembershipState
from tests.factories import make_account, make_anonymous, make_group


@pytest.fixture
def manager():
    return MembershipManager()


@pytest.fixture
def group():
    return make_group()


@pytest.fixture
def bob():
    return make_account()


def test_create_membership_defaults_to_active(manager, group, bob):
    membership = manager.create_membership(group, bob)
    assert membership.state == MembershipState.ACTIVE
    assert membership.group_key == group.key
    assert manager.is_member(group, bob)


def test_is_member_filters_on_states(manager, group, bob):
    manager.create_membership(group, bob, MembershipState.PENDING)
    assert not manager.is_member(group, bob)
    assert manager.is_member(
        group, bob, (MembershipState.ACTIVE, MembershipState.PENDING)
    )


def test_is_member_blocked(manager, group, bob):
    manager.create_membership(group, bob, MembershipState.BLOCKED)
    assert manager.is_member_blocked(group, bob)
    assert not manager.is_member(group, bob)


def test_anonymous_cannot_become_member(manager, group):
    with pytest.raises(MembershipError):
        manager.create_membership(group, make_anonymous())


def test_duplicate_membership_raises(manager, group, bob):
    manager.create_membership(group, bob)
    with pytest.raises(MembershipError) as exc_info:
        manager.create_membership(group, bob, MembershipState.PENDING)
    assert exc_info.value.group_title == group.title


def test_get_membership_returns_none_when_state_does_not_match(manager, group, bob):
    manager.create_membership(group, bob, MembershipState.PENDING)
    assert manager.get_membership(group, bob) is not None
    assert manager.get_membership(group, bob, [MembershipState.ACTIVE]) is None


def test_set_state_moves_membership(manager, group, bob):
    manager.create_membership(group, bob, MembershipState.PENDING)
    manager.set_state(group, bob, MembershipState.ACTIVE)
    assert manager.is_member(group, bob)


def test_set_state_without_membership_raises(manager, group, bob):
    with pytest.raises(MembershipError):
        manager.set_state(group, bob, MembershipState.ACTIVE)


def test_delete_membership(manager, group, bob):
    manager.create_membership(group, bob)
    assert manager.delete_membership(group, bob) is True
    assert manager.delete_membership(group, bob) is False
    assert manager.list_memberships(group) == []


def test_memberships_are_scoped_to_group(manager, group, bob):
    other = make_group(id=2, title="Chess club")
    manager.create_membership(group, bob)
    assert not manager.is_member(other, bob)
    assert len(manager.list_memberships(group)) == 1
    assert manager.list_memberships(other) == []
