"""Domain layer - data models and errors."""

from modules.og.domain.models import (
    ANONYMOUS_ID,
    Account,
    GroupEntity,
    Membership,
    MembershipState,
)
from modules.og.domain.errors import (
    AccessDeniedError,
    EntityNotFoundError,
    MembershipError,
    OgError,
)

__all__ = [
    "ANONYMOUS_ID",
    "Account",
    "GroupEntity",
    "Membership",
    "MembershipState",
    "AccessDeniedError",
    "EntityNotFoundError",
    "MembershipError",
    "OgError",
]
