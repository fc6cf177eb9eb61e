"""Membership manager: creates, queries and removes group memberships."""

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from infrastructure.logging import get_module_logger
from modules.og.domain import (
    Account,
    GroupEntity,
    Membership,
    MembershipError,
    MembershipState,
)

logger = get_module_logger()

DEFAULT_STATES = (MembershipState.ACTIVE,)


class MembershipManager:
    """In-memory membership store.

    One membership exists at most per (group, account). The anonymous
    account never holds a membership.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._memberships: Dict[Tuple[str, int, int], Membership] = {}

    @staticmethod
    def _key(group: GroupEntity, account: Account) -> Tuple[str, int, int]:
        return (group.entity_type_id, group.id, account.id)

    def create_membership(
        self,
        group: GroupEntity,
        account: Account,
        state: MembershipState = MembershipState.ACTIVE,
    ) -> Membership:
        """Create a membership.

        Raises:
            MembershipError: If the account is anonymous or already has a
                membership in the group.
        """
        if account.is_anonymous:
            raise MembershipError(
                "Anonymous users cannot become group members", group.title
            )
        key = self._key(group, account)
        with self._lock:
            if key in self._memberships:
                raise MembershipError(
                    f"User {account.id} already has a membership in {group.title}",
                    group.title,
                )
            membership = Membership(
                entity_type_id=group.entity_type_id,
                group_id=group.id,
                user_id=account.id,
                state=state,
            )
            self._memberships[key] = membership
        logger.info(
            "membership_created",
            entity_type_id=group.entity_type_id,
            group_id=group.id,
            user_id=account.id,
            state=state.value,
        )
        return membership

    def get_membership(
        self,
        group: GroupEntity,
        account: Account,
        states: Optional[Iterable[MembershipState]] = None,
    ) -> Optional[Membership]:
        """Return the account's membership, optionally filtered by state."""
        membership = self._memberships.get(self._key(group, account))
        if membership is None:
            return None
        if states is not None and membership.state not in tuple(states):
            return None
        return membership

    def is_member(
        self,
        group: GroupEntity,
        account: Account,
        states: Iterable[MembershipState] = DEFAULT_STATES,
    ) -> bool:
        return self.get_membership(group, account, states) is not None

    def is_member_blocked(self, group: GroupEntity, account: Account) -> bool:
        return self.is_member(group, account, (MembershipState.BLOCKED,))

    def set_state(
        self, group: GroupEntity, account: Account, state: MembershipState
    ) -> Membership:
        """Move an existing membership to a new state.

        Raises:
            MembershipError: If the account has no membership in the group.
        """
        with self._lock:
            membership = self._memberships.get(self._key(group, account))
            if membership is None:
                raise MembershipError(
                    f"User {account.id} is not a member of {group.title}",
                    group.title,
                )
            previous = membership.state
            membership.state = state
        logger.info(
            "membership_state_changed",
            group_id=group.id,
            user_id=account.id,
            previous_state=previous.value,
            state=state.value,
        )
        return membership

    def delete_membership(self, group: GroupEntity, account: Account) -> bool:
        """Remove the account's membership. Returns False if there was none."""
        with self._lock:
            removed = self._memberships.pop(self._key(group, account), None)
        if removed is not None:
            logger.info(
                "membership_deleted",
                group_id=group.id,
                user_id=account.id,
                state=removed.state.value,
            )
        return removed is not None

    def list_memberships(self, group: GroupEntity) -> List[Membership]:
        return [m for m in self._memberships.values() if m.group_key == group.key]
