"""Domain entities exposed by the application."""

from .directory_entry import DirectoryEntry
from .dispatch_report import DispatchOutcome, DispatchReport
from .notification import Notification
from .priority import NotificationPriority
from .recipient import Recipient
from .role import PrivilegedRole, is_privileged_role

__all__ = [
    "DirectoryEntry",
    "DispatchOutcome",
    "DispatchReport",
    "Notification",
    "NotificationPriority",
    "PrivilegedRole",
    "Recipient",
    "is_privileged_role",
]
