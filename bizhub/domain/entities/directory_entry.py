"""Domain entity describing an employee as seen by the organisation directory."""

from __future__ import annotations

from dataclasses import dataclass

from .recipient import Recipient
from .role import is_privileged_role


@dataclass(frozen=True)
class DirectoryEntry:
    """Read-only employee record supplied by the directory provider."""

    id: str
    role: str | None = None
    email: str | None = None
    user_email: str | None = None
    full_name: str | None = None

    def is_privileged(self) -> bool:
        """Return ``True`` when the entry's role is an administrative one."""

        return is_privileged_role(self.role)

    def contact_address(self) -> str | None:
        """Return the address used to reach this entry.

        The login address (``user_email``) takes precedence over the employee's
        ``email``. Blank values count as absent; ``None`` means unreachable.
        """

        for candidate in (self.user_email, self.email):
            if candidate and candidate.strip():
                return candidate.strip()
        return None

    def as_recipient(self) -> Recipient:
        return Recipient(id=self.id, email=self.contact_address())


__all__ = ["DirectoryEntry"]
