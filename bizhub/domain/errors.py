"""Exceptions raised by the notification dispatch subsystem."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification dispatch failures."""


class ValidationError(NotificationError, ValueError):
    """A required notification field is missing or malformed."""


class StoreError(NotificationError):
    """The entity record store rejected or could not perform a creation."""


class WriteError(NotificationError):
    """A single notification could not be persisted for ``recipient_id``."""

    def __init__(self, recipient_id: object, message: str | None = None) -> None:
        self.recipient_id = recipient_id
        super().__init__(
            message or f"Failed to create notification for recipient {recipient_id}"
        )


class SendError(NotificationError):
    """The batched escalation email could not be delivered."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(message)


__all__ = [
    "NotificationError",
    "SendError",
    "StoreError",
    "ValidationError",
    "WriteError",
]
