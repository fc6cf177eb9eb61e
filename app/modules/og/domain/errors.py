"""Errors for the organic groups module."""

from typing import Any, Optional


class OgError(Exception):
    """Base class for group membership and access errors."""


class EntityNotFoundError(OgError):
    """Raised when an account or group entity cannot be loaded.

    Attributes:
        entity_type_id: Entity type that was looked up (e.g. "node", "user")
        entity_id: Identifier that was not found
    """

    def __init__(self, entity_type_id: str, entity_id: Any):
        super().__init__(f"{entity_type_id} {entity_id} not found")
        self.entity_type_id = entity_type_id
        self.entity_id = entity_id


class MembershipError(OgError):
    """Raised when a membership change is not valid for the current state."""

    def __init__(self, message: str, group_title: Optional[str] = None):
        super().__init__(message)
        self.group_title = group_title


class AccessDeniedError(OgError):
    """Raised when an account lacks the permission an operation needs.

    Attributes:
        permission: The permission that was checked
        reason: Optional explanation returned by the access evaluator
    """

    def __init__(self, permission: str, reason: Optional[str] = None):
        super().__init__(reason or f"Access denied: {permission}")
        self.permission = permission
        self.reason = reason
