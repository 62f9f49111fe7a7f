"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bizhub.domain.entities import Notification, NotificationPriority
from bizhub.infrastructure.models import NotificationModel
from bizhub.utils import ensure_app_timezone


class NotificationRepository:
    """Read access to stored :class:`Notification` objects.

    Notifications are written through the record store; this repository only
    serves the notification centre listing.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        organisation_id: str,
        recipient_id: str,
        *,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.organisation_id == organisation_id)
            .filter(NotificationModel.recipient_id == recipient_id)
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_organisation(self, organisation_id: str) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.organisation_id == organisation_id)
            .count()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            organisation_id=model.organisation_id,
            recipient_id=model.recipient_id,
            recipient_email=model.recipient_email,
            type=model.type,
            title=model.title,
            message=model.message,
            link=model.link,
            priority=NotificationPriority(model.priority),
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
