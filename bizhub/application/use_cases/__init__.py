"""Aggregate application use cases."""

from .notifications import create_notification, notify_admins, notify_multiple

__all__ = [
    "create_notification",
    "notify_admins",
    "notify_multiple",
]
