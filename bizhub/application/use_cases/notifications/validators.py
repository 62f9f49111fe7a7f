"""Validation helpers shared by the notification use cases."""

from __future__ import annotations

from bizhub.domain.entities import NotificationPriority
from bizhub.domain.errors import ValidationError


def ensure_present(field_name: str, value: object) -> str:
    """Return ``value`` as a string or raise when it is missing or blank."""

    if value is None:
        raise ValidationError(f"'{field_name}' is required")
    text = str(value)
    if not text.strip():
        raise ValidationError(f"'{field_name}' must not be empty")
    return text


def coerce_priority(value: NotificationPriority | str | None) -> NotificationPriority:
    """Return the :class:`NotificationPriority` for ``value`` (``normal`` when omitted)."""

    if value is None:
        return NotificationPriority.NORMAL
    try:
        return NotificationPriority(value)
    except ValueError as exc:
        allowed = ", ".join(level.value for level in NotificationPriority)
        raise ValidationError(
            f"Invalid priority '{value}'; expected one of: {allowed}"
        ) from exc


def validate_content(
    *,
    organisation_id: str,
    type: str,
    title: str,
    message: str,
    priority: NotificationPriority | str | None,
) -> NotificationPriority:
    """Check the fields shared by every recipient and return the priority."""

    ensure_present("organisation_id", organisation_id)
    ensure_present("type", type)
    ensure_present("title", title)
    ensure_present("message", message)
    return coerce_priority(priority)
