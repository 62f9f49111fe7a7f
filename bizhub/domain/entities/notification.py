"""Domain entity representing an in-app notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .priority import NotificationPriority


@dataclass
class Notification:
    """Alert persisted for a single recipient of an organisation."""

    id: int | None
    organisation_id: str
    recipient_id: str
    type: str
    title: str
    message: str
    recipient_email: str | None = None
    link: str | None = None
    priority: NotificationPriority = NotificationPriority.NORMAL
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
