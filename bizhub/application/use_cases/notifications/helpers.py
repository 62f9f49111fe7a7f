"""Caller-facing helpers used by business-event handlers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from bizhub.domain.entities import (
    DirectoryEntry,
    DispatchReport,
    Notification,
    NotificationPriority,
    Recipient,
)
from bizhub.infrastructure.record_store import RecordStore

from .dispatch import dispatch_many
from .escalation import EmailSender, notify_privileged
from .write_notification import write_notification


@dataclass(frozen=True)
class NotificationPayload:
    """Content shared by every notification produced for one business event."""

    organisation_id: str
    type: str
    title: str
    message: str
    link: str | None = None
    priority: NotificationPriority | str = NotificationPriority.NORMAL


async def create_notification(
    store: RecordStore,
    payload: NotificationPayload,
    *,
    recipient_id: str,
    recipient_email: str | None = None,
) -> Notification:
    """Create a notification for a single recipient."""

    return await write_notification(
        store,
        organisation_id=payload.organisation_id,
        recipient_id=recipient_id,
        recipient_email=recipient_email,
        type=payload.type,
        title=payload.title,
        message=payload.message,
        link=payload.link,
        priority=payload.priority,
    )


async def notify_multiple(
    store: RecordStore,
    payload: NotificationPayload,
    recipients: Iterable[Recipient],
) -> DispatchReport:
    """Send the same notification to every entry of ``recipients``."""

    return await dispatch_many(
        store,
        organisation_id=payload.organisation_id,
        recipients=recipients,
        type=payload.type,
        title=payload.title,
        message=payload.message,
        link=payload.link,
        priority=payload.priority,
    )


async def notify_admins(
    store: RecordStore,
    payload: NotificationPayload,
    directory: Sequence[DirectoryEntry],
    *,
    send_email: bool = False,
    email_sender: EmailSender | None = None,
) -> DispatchReport:
    """Notify the administrators found in ``directory``.

    High and urgent notifications are also emailed when ``send_email`` is set.
    """

    return await notify_privileged(
        store,
        email_sender,
        organisation_id=payload.organisation_id,
        directory=directory,
        type=payload.type,
        title=payload.title,
        message=payload.message,
        link=payload.link,
        priority=payload.priority,
        escalate_by_email=send_email,
    )


__all__ = [
    "NotificationPayload",
    "create_notification",
    "notify_admins",
    "notify_multiple",
]
