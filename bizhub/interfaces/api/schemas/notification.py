"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bizhub.domain.entities import (
    DispatchOutcome,
    DispatchReport,
    Notification,
    NotificationPriority,
    Recipient,
)


class _OpaqueIdModel(BaseModel):
    """Accept numeric identifiers from clients and treat them as strings."""

    model_config = ConfigDict(coerce_numbers_to_str=True)


class NotificationContent(_OpaqueIdModel):
    """Fields shared by every notification created for a business event."""

    organisation_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    link: str | None = Field(default=None, max_length=500)
    priority: NotificationPriority = NotificationPriority.NORMAL


class RecipientIn(_OpaqueIdModel):
    id: str = Field(..., min_length=1)
    email: str | None = None

    def to_entity(self) -> Recipient:
        return Recipient(id=self.id, email=self.email)


class NotificationCreate(NotificationContent):
    """Payload used to notify a single recipient."""

    recipient_id: str = Field(..., min_length=1)
    recipient_email: str | None = None


class NotificationBulkCreate(NotificationContent):
    """Payload used to send the same notification to several recipients."""

    recipients: list[RecipientIn] = Field(default_factory=list)


class AdminNotificationCreate(NotificationContent):
    """Payload used to notify the administrators of an organisation."""

    send_email: bool = Field(
        default=False,
        description="Escalate high and urgent notifications by email",
    )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    organisation_id: str
    recipient_id: str
    recipient_email: str | None = None
    type: str
    title: str
    message: str
    link: str | None = None
    priority: NotificationPriority
    is_read: bool
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        return cls(
            id=notification.id or 0,
            organisation_id=notification.organisation_id,
            recipient_id=notification.recipient_id,
            recipient_email=notification.recipient_email,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            link=notification.link,
            priority=notification.priority,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class DispatchOutcomeRead(BaseModel):
    recipient_id: str
    recipient_email: str | None = None
    success: bool
    notification_id: int | None = None
    error: str | None = None

    @classmethod
    def from_entity(cls, outcome: DispatchOutcome) -> "DispatchOutcomeRead":
        return cls(
            recipient_id=outcome.recipient.id,
            recipient_email=outcome.recipient.email,
            success=outcome.ok,
            notification_id=outcome.notification.id if outcome.notification else None,
            error=str(outcome.error) if outcome.error else None,
        )


class DispatchReportRead(BaseModel):
    """Per-recipient outcome of a fan-out."""

    total: int
    succeeded: int
    failed: int
    outcomes: list[DispatchOutcomeRead] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, report: DispatchReport) -> "DispatchReportRead":
        return cls(
            total=len(report),
            succeeded=len(report.succeeded),
            failed=len(report.failed),
            outcomes=[DispatchOutcomeRead.from_entity(outcome) for outcome in report],
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
