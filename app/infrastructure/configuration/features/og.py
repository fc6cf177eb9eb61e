"""Organic groups feature settings."""

import json
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.og")

KNOWN_ROLES = ("non-member", "member")


class OgSettings(FeatureSettings):
    """Configuration for group access evaluation.

    Environment Variables:
        OG_ROLE_PERMISSIONS: JSON dict of per-bundle role permissions
        OG_GROUP_MANAGER_FULL_ACCESS: Grant the group owner every permission
        OG_DEFAULT_NON_MEMBER_PERMISSIONS: Permissions for non-members of
            bundles missing from OG_ROLE_PERMISSIONS

    Role Permissions (OG_ROLE_PERMISSIONS):
        Keys are "<entity_type_id>.<bundle>", values map a group role to the
        permissions it grants.

        Schema:
            {
                "node.group": {
                    "non-member": ["subscribe without approval"],
                    "member": ["create post content"]
                },
                "node.private_group": {
                    "non-member": []
                }
            }

        Validation:
            - Keys must contain exactly one "."
            - Only "non-member" and "member" roles are recognized
    """

    role_permissions: Dict[str, Dict[str, List[str]]] = Field(
        default_factory=dict,
        alias="OG_ROLE_PERMISSIONS",
        description="Per-bundle role permissions",
    )

    @field_validator("role_permissions", mode="before")
    @classmethod
    def _parse_role_permissions(cls, v: Optional[Any]) -> Any:
        """Parse OG_ROLE_PERMISSIONS from JSON string or dict."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return v
        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            try:
                return json.loads(s) if s else {}
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid OG_ROLE_PERMISSIONS JSON: {e} (value: {s[:80]}...)"
                ) from e
        raise ValueError("OG_ROLE_PERMISSIONS must be a JSON string or a mapping")

    @field_validator("role_permissions", mode="after")
    @classmethod
    def _validate_role_permissions(cls, v: Dict[str, Dict[str, List[str]]]):
        """Validate bundle keys and role names."""
        for bundle_key, roles in v.items():
            if bundle_key.count(".") != 1:
                raise ValueError(
                    f"OG_ROLE_PERMISSIONS key must be '<entity_type_id>.<bundle>': {bundle_key}"
                )
            for role in roles:
                if role not in KNOWN_ROLES:
                    logger.warning(
                        "unknown_group_role_configured",
                        bundle=bundle_key,
                        role=role,
                    )
        return v

    group_manager_full_access: bool = Field(
        default=True,
        alias="OG_GROUP_MANAGER_FULL_ACCESS",
        description="Group owners are granted every group permission",
    )
    default_non_member_permissions: List[str] = Field(
        default_factory=lambda: ["subscribe"],
        alias="OG_DEFAULT_NON_MEMBER_PERMISSIONS",
        description="Non-member permissions for bundles without explicit config",
    )

    def permissions_for(
        self, entity_type_id: str, bundle: str, role: str
    ) -> List[str]:
        """Return the permissions a group role holds for a bundle."""
        roles = self.role_permissions.get(f"{entity_type_id}.{bundle}")
        if roles is None:
            return list(self.default_non_member_permissions) if role == "non-member" else []
        return list(roles.get(role, []))
