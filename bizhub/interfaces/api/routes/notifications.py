"""Endpoints used by business-event handlers to emit notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from bizhub.application.use_cases.notifications import (
    EmailSender,
    NotificationPayload,
    create_notification as create_notification_uc,
    notify_admins as notify_admins_uc,
    notify_multiple as notify_multiple_uc,
)
from bizhub.domain.errors import ValidationError, WriteError
from bizhub.infrastructure.database import get_db
from bizhub.infrastructure.record_store import RecordStore
from bizhub.infrastructure.repositories import EmployeeRepository, NotificationRepository
from bizhub.interfaces.api.dependencies import get_email_sender, get_record_store
from bizhub.interfaces.api.schemas import (
    AdminNotificationCreate,
    DispatchReportRead,
    NotificationBulkCreate,
    NotificationContent,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _to_payload(content: NotificationContent) -> NotificationPayload:
    return NotificationPayload(
        organisation_id=content.organisation_id,
        type=content.type,
        title=content.title,
        message=content.message,
        link=content.link,
        priority=content.priority,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    organisation_id: str,
    recipient_id: str,
    unread_only: bool = False,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the most recent notifications of a recipient, newest first."""

    notifications = NotificationRepository(db).list_for_recipient(
        organisation_id,
        recipient_id,
        unread_only=unread_only,
        limit=limit,
    )
    return [NotificationRead.from_entity(notification) for notification in notifications]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_in: NotificationCreate,
    store: RecordStore = Depends(get_record_store),
) -> NotificationRead:
    """Create a notification for a single recipient."""

    try:
        notification = await create_notification_uc(
            store,
            _to_payload(notification_in),
            recipient_id=notification_in.recipient_id,
            recipient_email=notification_in.recipient_email,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except WriteError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return NotificationRead.from_entity(notification)


@router.post("/bulk", response_model=DispatchReportRead)
async def notify_multiple(
    bulk_in: NotificationBulkCreate,
    store: RecordStore = Depends(get_record_store),
) -> DispatchReportRead:
    """Send the same notification to every listed recipient."""

    try:
        report = await notify_multiple_uc(
            store,
            _to_payload(bulk_in),
            [recipient.to_entity() for recipient in bulk_in.recipients],
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return DispatchReportRead.from_entity(report)


@router.post("/admins", response_model=DispatchReportRead)
async def notify_admins(
    admin_in: AdminNotificationCreate,
    db: Session = Depends(get_db),
    store: RecordStore = Depends(get_record_store),
    email_sender: EmailSender = Depends(get_email_sender),
) -> DispatchReportRead:
    """Notify the organisation's administrators, escalating by email when urgent."""

    directory = EmployeeRepository(db).list_for_organisation(admin_in.organisation_id)
    try:
        report = await notify_admins_uc(
            store,
            _to_payload(admin_in),
            directory,
            send_email=admin_in.send_email,
            email_sender=email_sender,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return DispatchReportRead.from_entity(report)
