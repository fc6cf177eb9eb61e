"""Fakes for the collaborators of the subscribe formatter."""

from typing import Any, Dict, Iterable, Mapping, Optional, Set

import pytest

from infrastructure.routing import Url
from modules.og import AccessResult
from modules.og.domain import MembershipState


class FakeMemberships:
    def __init__(self):
        self.states: Dict[int, MembershipState] = {}

    def add(self, account, state: MembershipState = MembershipState.ACTIVE):
        self.states[account.id] = state

    def is_member(self, group, account, states: Iterable[Any]) -> bool:
        return self.states.get(account.id) in tuple(states)

    def is_member_blocked(self, group, account) -> bool:
        return self.states.get(account.id) == MembershipState.BLOCKED


class FakeAccess:
    def __init__(self, allowed: Optional[Set[str]] = None):
        self.allowed = set(allowed or ())
        self.calls = []

    def user_access(self, group, permission, user):
        self.calls.append(permission)
        if permission in self.allowed:
            return AccessResult.allowed()
        return AccessResult.neutral()


class FakeUrls:
    PATHS = {
        "og.subscribe": "/group/{entity_type_id}/{group}/subscribe",
        "og.unsubscribe": "/group/{entity_type_id}/{group}/unsubscribe",
        "user.login": "/user/login",
    }

    def url_for(
        self,
        route_name: str,
        params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Url:
        path = self.PATHS[route_name].format(**(params or {}))
        return Url(path=path, query=dict(query or {}), route_name=route_name)


class FakeDestination:
    def __init__(self, destination: str = "/node/1"):
        self.destination = destination

    def get_as_array(self) -> Dict[str, str]:
        return {"destination": self.destination}


@pytest.fixture
def memberships():
    return FakeMemberships()


@pytest.fixture
def access():
    return FakeAccess()


@pytest.fixture
def urls():
    return FakeUrls()


@pytest.fixture
def destination():
    return FakeDestination()
