"""Fan a notification out to many recipients concurrently."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import anyio

from bizhub.domain.entities import (
    DispatchOutcome,
    DispatchReport,
    NotificationPriority,
    Recipient,
)
from bizhub.domain.errors import WriteError
from bizhub.infrastructure.record_store import RecordStore

from .validators import validate_content
from .write_notification import build_notification_fields, persist_fields

logger = logging.getLogger(__name__)


async def dispatch_many(
    store: RecordStore,
    *,
    organisation_id: str,
    recipients: Iterable[Recipient],
    type: str,
    title: str,
    message: str,
    link: str | None = None,
    priority: NotificationPriority | str | None = None,
) -> DispatchReport:
    """Write one notification per recipient and report every outcome.

    All writes start together and the call returns only once each of them has
    succeeded or failed. A failed write is recorded in the report and never
    stops its siblings. Duplicate recipients each get their own record.
    """

    targets = list(recipients)
    # Validate everything up front so a malformed payload writes nothing.
    validate_content(
        organisation_id=organisation_id,
        type=type,
        title=title,
        message=message,
        priority=priority,
    )
    batch = [
        build_notification_fields(
            organisation_id=organisation_id,
            recipient_id=recipient.id,
            recipient_email=recipient.email,
            type=type,
            title=title,
            message=message,
            link=link,
            priority=priority,
        )
        for recipient in targets
    ]
    if not targets:
        return DispatchReport(outcomes=())

    outcomes: list[DispatchOutcome | None] = [None] * len(targets)

    async def deliver(index: int, recipient: Recipient, fields: dict[str, Any]) -> None:
        try:
            notification = await persist_fields(store, fields)
        except WriteError as exc:
            outcomes[index] = DispatchOutcome(recipient=recipient, error=exc)
        else:
            outcomes[index] = DispatchOutcome(recipient=recipient, notification=notification)

    async with anyio.create_task_group() as task_group:
        for index, (recipient, fields) in enumerate(zip(targets, batch)):
            task_group.start_soon(deliver, index, recipient, fields)

    report = DispatchReport(outcomes=tuple(outcomes))
    if report.failed:
        logger.warning(
            "Notification '%s' dispatched to %d of %d recipient(s) in organisation %s",
            type,
            len(report.succeeded),
            len(report),
            organisation_id,
        )
    else:
        logger.debug(
            "Notification '%s' dispatched to %d recipient(s) in organisation %s",
            type,
            len(report),
            organisation_id,
        )
    return report


__all__ = ["dispatch_many"]
