"""Group access evaluation.

Answers whether an account holds a group permission such as
"subscribe without approval" or "subscribe".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infrastructure.configuration import OgSettings
from infrastructure.logging import get_module_logger
from modules.og.domain import Account, GroupEntity, MembershipState
from modules.og.membership import MembershipManager

logger = get_module_logger()

ADMINISTER_GROUPS = "administer organic groups"
SUBSCRIBE = "subscribe"
SUBSCRIBE_WITHOUT_APPROVAL = "subscribe without approval"

ROLE_MEMBER = "member"
ROLE_NON_MEMBER = "non-member"


class AccessStatus(Enum):
    """Outcome of an access check.

    Attributes:
        ALLOWED: The permission is granted
        NEUTRAL: No rule grants the permission
        FORBIDDEN: A rule explicitly denies the permission
    """

    ALLOWED = "allowed"
    NEUTRAL = "neutral"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AccessResult:
    """Result of an access check.

    Attributes:
        status: AccessStatus -- high-level outcome
        reason: Optional[str] -- why access was denied, for logs and messages
    """

    status: AccessStatus
    reason: Optional[str] = None

    @property
    def is_allowed(self) -> bool:
        return self.status == AccessStatus.ALLOWED

    @property
    def is_forbidden(self) -> bool:
        return self.status == AccessStatus.FORBIDDEN

    @classmethod
    def allowed(cls) -> "AccessResult":
        return cls(status=AccessStatus.ALLOWED)

    @classmethod
    def neutral(cls, reason: Optional[str] = None) -> "AccessResult":
        return cls(status=AccessStatus.NEUTRAL, reason=reason)

    @classmethod
    def forbidden(cls, reason: str) -> "AccessResult":
        return cls(status=AccessStatus.FORBIDDEN, reason=reason)


class OgAccess:
    """Evaluates group permissions for accounts.

    Resolution order:
    1. Site permission "administer organic groups" -> allowed
    2. Group owner, when group_manager_full_access is on -> allowed
    3. Blocked membership -> forbidden
    4. Active membership -> permissions of the "member" role
    5. Anyone else -> permissions of the "non-member" role
    """

    def __init__(self, settings: OgSettings, memberships: MembershipManager):
        self._settings = settings
        self._memberships = memberships

    def user_access(
        self, group: GroupEntity, permission: str, user: Account
    ) -> AccessResult:
        if user.has_permission(ADMINISTER_GROUPS):
            return AccessResult.allowed()

        if self._settings.group_manager_full_access and group.is_owned_by(user):
            return AccessResult.allowed()

        if self._memberships.is_member_blocked(group, user):
            return AccessResult.forbidden(
                f"User {user.id} is blocked in {group.entity_type_id} {group.id}"
            )

        role = (
            ROLE_MEMBER
            if self._memberships.is_member(group, user, (MembershipState.ACTIVE,))
            else ROLE_NON_MEMBER
        )
        granted = self._settings.permissions_for(
            group.entity_type_id, group.bundle, role
        )

        result = (
            AccessResult.allowed()
            if permission in granted
            else AccessResult.neutral(f"Role {role} lacks '{permission}'")
        )
        logger.debug(
            "group_access_checked",
            group_id=group.id,
            user_id=user.id,
            permission=permission,
            role=role,
            status=result.status.value,
        )
        return result
