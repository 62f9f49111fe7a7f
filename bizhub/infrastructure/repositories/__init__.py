"""Repository implementations for infrastructure layer."""

from .employee_repository import EmployeeRepository
from .notification_repository import NotificationRepository

__all__ = [
    "EmployeeRepository",
    "NotificationRepository",
]
