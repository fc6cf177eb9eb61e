"""Data models for organic groups: accounts, group entities and memberships.

Lightweight dataclasses (not Pydantic) used across the membership manager,
the access evaluator and the subscribe formatter. HTTP request and response
validation lives in the API layer.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import FrozenSet, Optional, Tuple

ANONYMOUS_ID = 0


class MembershipState(str, Enum):
    """State of an account's membership in a group."""

    ACTIVE = "active"
    PENDING = "pending"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Account:
    """A site account as seen by group code.

    Attributes:
        id: Account identifier. 0 is the anonymous account.
        name: Login name, exposed through the [current-user:name] token.
        email: Optional email address.
        permissions: Site-wide permissions (e.g. "administer organic groups").
    """

    id: int
    name: str
    email: Optional[str] = None
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_authenticated(self) -> bool:
        return self.id != ANONYMOUS_ID

    @property
    def is_anonymous(self) -> bool:
        return self.id == ANONYMOUS_ID

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    @classmethod
    def anonymous(cls) -> "Account":
        return cls(id=ANONYMOUS_ID, name="Anonymous")


@dataclass
class GroupEntity:
    """A content entity acting as an organic group.

    Attributes:
        id: Entity identifier, unique per entity type.
        entity_type_id: Entity type (e.g. "node").
        bundle: Entity bundle (e.g. "group"); selects role permissions.
        title: Human readable label.
        owner_id: Owning account id, or None for entities without an owner.
    """

    id: int
    entity_type_id: str
    bundle: str
    title: str
    owner_id: Optional[int] = None

    @property
    def key(self) -> Tuple[str, int]:
        return (self.entity_type_id, self.id)

    @property
    def canonical_path(self) -> str:
        return f"/{self.entity_type_id}/{self.id}"

    def is_owned_by(self, account: Account) -> bool:
        return self.owner_id is not None and self.owner_id == account.id


@dataclass
class Membership:
    """An account's membership in a group."""

    entity_type_id: str
    group_id: int
    user_id: int
    state: MembershipState = MembershipState.ACTIVE
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def group_key(self) -> Tuple[str, int]:
        return (self.entity_type_id, self.group_id)
