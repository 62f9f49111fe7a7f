"""Priority levels attached to notifications."""

from __future__ import annotations

from enum import Enum


class NotificationPriority(str, Enum):
    """Closed set of priorities a notification can carry."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def escalates(self) -> bool:
        """Return ``True`` for the levels that warrant an email escalation."""

        return self in _ESCALATING_PRIORITIES


_ESCALATING_PRIORITIES = frozenset({NotificationPriority.HIGH, NotificationPriority.URGENT})


__all__ = ["NotificationPriority"]
