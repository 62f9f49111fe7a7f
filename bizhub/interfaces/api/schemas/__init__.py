from .notification import (
    AdminNotificationCreate,
    DispatchOutcomeRead,
    DispatchReportRead,
    NotificationBulkCreate,
    NotificationContent,
    NotificationCreate,
    NotificationRead,
    RecipientIn,
)

__all__ = [
    "AdminNotificationCreate",
    "DispatchOutcomeRead",
    "DispatchReportRead",
    "NotificationBulkCreate",
    "NotificationContent",
    "NotificationCreate",
    "NotificationRead",
    "RecipientIn",
]
