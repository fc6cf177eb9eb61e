"""Collaborator contracts consumed by the subscribe formatter.

Protocols only: any object with matching methods works, which keeps the
link resolver testable with plain fakes.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Protocol

from infrastructure.routing import Url


class GroupLike(Protocol):
    id: int
    entity_type_id: str
    owner_id: Optional[int]


class ViewerLike(Protocol):
    id: int

    @property
    def is_authenticated(self) -> bool: ...


class AccessResultLike(Protocol):
    @property
    def is_allowed(self) -> bool: ...


class GroupAccessEvaluator(Protocol):
    def user_access(
        self, group: Any, permission: str, user: Any
    ) -> AccessResultLike: ...


class MembershipQuery(Protocol):
    def is_member(self, group: Any, account: Any, states: Iterable[Any]) -> bool: ...

    def is_member_blocked(self, group: Any, account: Any) -> bool: ...


class UrlBuilder(Protocol):
    def url_for(
        self,
        route_name: str,
        params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Url: ...


class DestinationProvider(Protocol):
    def get_as_array(self) -> Dict[str, str]: ...


class TokenReplacer(Protocol):
    def replace(
        self, text: str, data: Optional[Mapping[str, Any]] = None, clear: bool = False
    ) -> str: ...
