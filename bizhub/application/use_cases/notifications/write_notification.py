"""Persist a single notification through the entity record store."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bizhub.domain.entities import Notification, NotificationPriority
from bizhub.domain.errors import WriteError
from bizhub.infrastructure.record_store import RecordStore
from bizhub.utils import ensure_app_timezone

from .validators import coerce_priority, ensure_present

logger = logging.getLogger(__name__)

NOTIFICATION_ENTITY = "Notification"


def build_notification_fields(
    *,
    organisation_id: str,
    recipient_id: str,
    recipient_email: str | None,
    type: str,
    title: str,
    message: str,
    link: str | None = None,
    priority: NotificationPriority | str | None = None,
) -> dict[str, Any]:
    """Validate the payload and return the fields of a new unread notification."""

    return {
        "organisation_id": ensure_present("organisation_id", organisation_id),
        "recipient_id": ensure_present("recipient_id", recipient_id),
        "recipient_email": recipient_email or None,
        "type": ensure_present("type", type),
        "title": ensure_present("title", title),
        "message": ensure_present("message", message),
        "link": link or None,
        "priority": coerce_priority(priority).value,
        "is_read": False,
    }


async def write_notification(
    store: RecordStore,
    *,
    organisation_id: str,
    recipient_id: str,
    recipient_email: str | None,
    type: str,
    title: str,
    message: str,
    link: str | None = None,
    priority: NotificationPriority | str | None = None,
) -> Notification:
    """Create exactly one notification record for ``recipient_id``.

    Raises :class:`~bizhub.domain.errors.ValidationError` before touching the
    store when the payload is malformed, and :class:`WriteError` when the store
    fails. The write is attempted once.
    """

    fields = build_notification_fields(
        organisation_id=organisation_id,
        recipient_id=recipient_id,
        recipient_email=recipient_email,
        type=type,
        title=title,
        message=message,
        link=link,
        priority=priority,
    )
    return await persist_fields(store, fields)


async def persist_fields(store: RecordStore, fields: dict[str, Any]) -> Notification:
    """Create one record from already validated ``fields``."""

    try:
        record = await store.create(NOTIFICATION_ENTITY, fields)
    except Exception as exc:
        logger.warning(
            "Failed to create notification for recipient %s: %s",
            fields["recipient_id"],
            exc,
        )
        raise WriteError(fields["recipient_id"], str(exc)) from exc
    return notification_from_record(record, fields)


def notification_from_record(
    record: Mapping[str, Any], fields: Mapping[str, Any]
) -> Notification:
    """Build the domain entity from a stored record, falling back to ``fields``."""

    merged = {**fields, **{key: value for key, value in record.items() if value is not None}}
    return Notification(
        id=merged.get("id"),
        organisation_id=merged["organisation_id"],
        recipient_id=merged["recipient_id"],
        recipient_email=merged.get("recipient_email"),
        type=merged["type"],
        title=merged["title"],
        message=merged["message"],
        link=merged.get("link"),
        priority=NotificationPriority(merged["priority"]),
        is_read=bool(merged.get("is_read", False)),
        created_at=ensure_app_timezone(merged.get("created_at")),
    )


__all__ = [
    "NOTIFICATION_ENTITY",
    "build_notification_fields",
    "notification_from_record",
    "persist_fields",
    "write_notification",
]
