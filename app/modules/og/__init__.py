"""Organic groups: group entities, memberships and group access."""

from modules.og.access import (
    SUBSCRIBE,
    SUBSCRIBE_WITHOUT_APPROVAL,
    AccessResult,
    AccessStatus,
    OgAccess,
)
from modules.og.entities import EntityStorage
from modules.og.membership import MembershipManager

__all__ = [
    "SUBSCRIBE",
    "SUBSCRIBE_WITHOUT_APPROVAL",
    "AccessResult",
    "AccessStatus",
    "OgAccess",
    "EntityStorage",
    "MembershipManager",
]
