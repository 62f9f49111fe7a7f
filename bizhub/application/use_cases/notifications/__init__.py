"""Public helpers for emitting notifications."""

from .dispatch import dispatch_many
from .escalation import (
    EmailSender,
    collect_email_addresses,
    notify_privileged,
    resolve_contact_address,
    select_privileged,
)
from .helpers import (
    NotificationPayload,
    create_notification,
    notify_admins,
    notify_multiple,
)
from .write_notification import write_notification

__all__ = [
    "EmailSender",
    "NotificationPayload",
    "collect_email_addresses",
    "create_notification",
    "dispatch_many",
    "notify_admins",
    "notify_multiple",
    "notify_privileged",
    "resolve_contact_address",
    "select_privileged",
    "write_notification",
]
