"""Utility helpers for sending notification emails via SendGrid."""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Iterable
from functools import partial
from typing import Any

import anyio
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from bizhub.config import get_settings
from bizhub.domain.entities import NotificationPriority
from bizhub.domain.errors import SendError

logger = logging.getLogger(__name__)

PRIORITY_EMOJIS: dict[NotificationPriority, str] = {
    NotificationPriority.URGENT: "\U0001F6A8",
    NotificationPriority.HIGH: "⚠️",
    NotificationPriority.NORMAL: "ℹ️",
    NotificationPriority.LOW: "\U0001F4DD",
}

_ACCENT_COLORS: dict[NotificationPriority, str] = {
    NotificationPriority.URGENT: "#ef4444",
    NotificationPriority.HIGH: "#f59e0b",
}
_DEFAULT_ACCENT = "#1EB053"


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        # Fall back to a JSON string for unrecognised payloads
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _send_error_from_exception(exc: Exception) -> SendError:
    """Log a SendGrid API error and wrap it into a :class:`SendError`."""

    status_code = getattr(exc, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(exc, "body", None))

    if status_code and details:
        logger.error(
            "SendGrid API request failed with status %s: %s", status_code, details
        )
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.exception("Error sending email via SendGrid: %s", exc)

    return SendError(
        "SendGrid API request failed",
        status_code=status_code if isinstance(status_code, int) else None,
        details=details,
    )


def _send_error_from_response(response: Any) -> SendError:
    """Log details from an unsuccessful SendGrid response object."""

    status_code = getattr(response, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(response, "body", None))

    if details:
        logger.error(
            "SendGrid API responded with status %s: %s", status_code, details
        )
    else:
        logger.error("SendGrid API responded with status %s", status_code)

    return SendError(
        f"SendGrid API responded with status {status_code}",
        status_code=status_code if isinstance(status_code, int) else None,
        details=details,
    )


def build_notification_subject(title: str, priority: NotificationPriority) -> str:
    return f"{PRIORITY_EMOJIS[priority]} {title}"


def render_notification_email(
    title: str, message: str, priority: NotificationPriority
) -> str:
    """Return the HTML body used for escalated notifications."""

    accent = _ACCENT_COLORS.get(priority, _DEFAULT_ACCENT)
    attention = (
        "<p style=\"color: rgba(255,255,255,0.9); margin: 8px 0 0; font-size: 14px;\">"
        "Requires immediate attention</p>"
        if priority.escalates
        else ""
    )
    return "".join(
        (
            "<div style=\"font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;\">",
            "<div style=\"background: linear-gradient(135deg, #1EB053 0%, #0072C6 100%); "
            "padding: 24px; text-align: center;\">",
            f"<div style=\"font-size: 48px;\">{PRIORITY_EMOJIS[priority]}</div>",
            f"<h1 style=\"color: white; margin: 0; font-size: 24px;\">{html.escape(title)}</h1>",
            attention,
            "</div>",
            "<div style=\"padding: 32px 24px;\">",
            f"<div style=\"background: #f9fafb; border-left: 4px solid {accent}; "
            "padding: 16px; border-radius: 8px; margin-bottom: 24px;\">",
            f"<p style=\"margin: 0; color: #374151; font-size: 16px;\">{html.escape(message)}</p>",
            "</div>",
            "<p style=\"color: #6b7280; font-size: 14px; margin: 0;\">"
            "Log in to your Business Management System to view details and take action.</p>",
            "</div>",
            "<div style=\"background: #f9fafb; padding: 20px 24px; text-align: center;\">",
            "<p style=\"margin: 0; color: #9ca3af; font-size: 12px;\">"
            "This is an automated notification from your Business Management System</p>",
            "</div>",
            "</div>",
        )
    )


class SendGridEmailSender:
    """Deliver escalation emails as a single SendGrid request."""

    def __init__(self, api_key: str | None, sender: str | None) -> None:
        self._api_key = api_key
        self._sender = sender

    @classmethod
    def from_settings(cls) -> "SendGridEmailSender":
        settings = get_settings()
        return cls(settings.sendgrid_api_key, settings.sendgrid_sender)

    async def send_batch(
        self,
        addresses: Iterable[str],
        title: str,
        message: str,
        priority: NotificationPriority,
    ) -> None:
        """Send one email request addressed to every entry in ``addresses``."""

        await anyio.to_thread.run_sync(
            partial(self._send_sync, list(addresses), title, message, priority)
        )

    def _send_sync(
        self,
        addresses: list[str],
        title: str,
        message: str,
        priority: NotificationPriority,
    ) -> None:
        if not (self._api_key and self._sender):
            logger.info("SendGrid configuration incomplete; skipping email delivery")
            raise SendError("SendGrid configuration incomplete")
        if not addresses:
            raise SendError("At least one recipient address is required")

        # One personalization per address; recipients never see each other.
        mail = Mail(
            from_email=self._sender,
            to_emails=addresses,
            subject=build_notification_subject(title, priority),
            html_content=render_notification_email(title, message, priority),
            is_multiple=True,
        )

        try:
            client = SendGridAPIClient(self._api_key)
            response = client.send(mail)
        except Exception as exc:
            raise _send_error_from_exception(exc) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            raise _send_error_from_response(response)

        logger.info("Sent notification email '%s' to %d recipient(s)", title, len(addresses))


__all__ = [
    "PRIORITY_EMOJIS",
    "SendGridEmailSender",
    "build_notification_subject",
    "render_notification_email",
]
