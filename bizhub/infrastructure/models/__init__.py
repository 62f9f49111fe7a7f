"""ORM models used by the application infrastructure."""

from .employee import EmployeeModel
from .notification import NotificationModel

__all__ = [
    "EmployeeModel",
    "NotificationModel",
]
