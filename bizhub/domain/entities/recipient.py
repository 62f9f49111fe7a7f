"""Addressing tuple consumed by the fan-out dispatcher."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recipient:
    """Identifier and optional contact address of a notification recipient."""

    id: str
    email: str | None = None


__all__ = ["Recipient"]
