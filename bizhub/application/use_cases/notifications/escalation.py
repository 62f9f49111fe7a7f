"""Notify an organisation's administrators and escalate urgent alerts by email."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from bizhub.domain.entities import DirectoryEntry, DispatchReport, NotificationPriority
from bizhub.infrastructure.record_store import RecordStore

from .dispatch import dispatch_many
from .validators import coerce_priority

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    async def send_batch(
        self,
        addresses: Iterable[str],
        title: str,
        message: str,
        priority: NotificationPriority,
    ) -> None:
        ...


def select_privileged(directory: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Return the entries whose role is one of the administrative roles."""

    return [entry for entry in directory if entry.is_privileged()]


def resolve_contact_address(entry: DirectoryEntry) -> str | None:
    """Return ``user_email`` when set, otherwise ``email``, otherwise ``None``."""

    return entry.contact_address()


def collect_email_addresses(entries: Iterable[DirectoryEntry]) -> list[str]:
    """Return the distinct resolvable addresses of ``entries`` in directory order."""

    addresses: list[str] = []
    for entry in entries:
        address = resolve_contact_address(entry)
        if address and address not in addresses:
            addresses.append(address)
    return addresses


def should_escalate(priority: NotificationPriority, escalate_by_email: bool) -> bool:
    return escalate_by_email and priority.escalates


async def notify_privileged(
    store: RecordStore,
    email_sender: EmailSender | None,
    *,
    organisation_id: str,
    directory: Sequence[DirectoryEntry],
    type: str,
    title: str,
    message: str,
    link: str | None = None,
    priority: NotificationPriority | str | None = None,
    escalate_by_email: bool = False,
) -> DispatchReport:
    """Notify every privileged directory entry, then escalate by email if needed.

    Entries without a contact address still get the in-app notification; they
    are only left out of the email. Email failures are logged and never change
    the returned report.
    """

    level = coerce_priority(priority)
    admins = select_privileged(directory)

    report = await dispatch_many(
        store,
        organisation_id=organisation_id,
        recipients=[entry.as_recipient() for entry in admins],
        type=type,
        title=title,
        message=message,
        link=link,
        priority=level,
    )

    if should_escalate(level, escalate_by_email):
        await _escalate(email_sender, admins, title=title, message=message, priority=level)

    return report


async def _escalate(
    email_sender: EmailSender | None,
    admins: Sequence[DirectoryEntry],
    *,
    title: str,
    message: str,
    priority: NotificationPriority,
) -> None:
    addresses = collect_email_addresses(admins)
    if not addresses:
        logger.info("No administrator email addresses resolved; skipping escalation")
        return
    if email_sender is None:
        logger.warning("No email sender configured; skipping escalation for '%s'", title)
        return

    try:
        await email_sender.send_batch(addresses, title, message, priority)
    except Exception:
        logger.exception(
            "Failed to send %s notification email to %d administrator(s)",
            priority.value,
            len(addresses),
        )


__all__ = [
    "EmailSender",
    "collect_email_addresses",
    "notify_privileged",
    "resolve_contact_address",
    "select_privileged",
    "should_escalate",
]
