"""Roles that receive administrative notifications."""

from __future__ import annotations

from enum import Enum


class PrivilegedRole(str, Enum):
    """Closed set of directory roles treated as administrators."""

    SUPER_ADMIN = "super_admin"
    ORG_ADMIN = "org_admin"
    HR_ADMIN = "hr_admin"
    WAREHOUSE_MANAGER = "warehouse_manager"

    @classmethod
    def parse(cls, role: str | None) -> "PrivilegedRole | None":
        """Return the matching member for ``role`` or ``None`` when unprivileged."""

        if not role:
            return None
        try:
            return cls(role)
        except ValueError:
            return None


def is_privileged_role(role: str | None) -> bool:
    """Return ``True`` when ``role`` belongs to :class:`PrivilegedRole`."""

    return PrivilegedRole.parse(role) is not None


__all__ = ["PrivilegedRole", "is_privileged_role"]
