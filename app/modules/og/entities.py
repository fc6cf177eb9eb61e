"""In-memory entity storage for accounts and group entities."""

import threading
from itertools import count
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from infrastructure.logging import get_module_logger
from modules.og.domain import Account, EntityNotFoundError, GroupEntity

logger = get_module_logger()


class EntityStorage:
    """Stores accounts and group entities keyed by id.

    Account id 0 always loads the anonymous account. Group ids are allocated
    per entity type, starting at 1.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._accounts: Dict[int, Account] = {}
        self._groups: Dict[Tuple[str, int], GroupEntity] = {}
        self._account_ids = count(1)
        self._group_ids: Dict[str, Iterator[int]] = {}

    def create_account(
        self,
        name: str,
        email: Optional[str] = None,
        permissions: Iterable[str] = (),
    ) -> Account:
        with self._lock:
            if any(a.name == name for a in self._accounts.values()):
                raise ValueError(f"Account name already taken: {name}")
            account = Account(
                id=next(self._account_ids),
                name=name,
                email=email,
                permissions=frozenset(permissions),
            )
            self._accounts[account.id] = account
        logger.info("account_created", user_id=account.id, name=name)
        return account

    def load_account(self, user_id: int) -> Account:
        """Load an account by id.

        Raises:
            EntityNotFoundError: If no account has this id.
        """
        if user_id == 0:
            return Account.anonymous()
        account = self._accounts.get(user_id)
        if account is None:
            raise EntityNotFoundError("user", user_id)
        return account

    def find_account_by_name(self, name: str) -> Optional[Account]:
        return next((a for a in self._accounts.values() if a.name == name), None)

    def create_group(
        self,
        title: str,
        owner_id: Optional[int] = None,
        entity_type_id: str = "node",
        bundle: str = "group",
    ) -> GroupEntity:
        with self._lock:
            ids = self._group_ids.setdefault(entity_type_id, count(1))
            group = GroupEntity(
                id=next(ids),
                entity_type_id=entity_type_id,
                bundle=bundle,
                title=title,
                owner_id=owner_id,
            )
            self._groups[group.key] = group
        logger.info(
            "group_created",
            entity_type_id=entity_type_id,
            group_id=group.id,
            bundle=bundle,
            owner_id=owner_id,
        )
        return group

    def load_group(self, entity_type_id: str, group_id: int) -> GroupEntity:
        """Load a group entity.

        Raises:
            EntityNotFoundError: If the entity does not exist.
        """
        group = self._groups.get((entity_type_id, group_id))
        if group is None:
            raise EntityNotFoundError(entity_type_id, group_id)
        return group

    def list_groups(self) -> List[GroupEntity]:
        return list(self._groups.values())
