"""Per-recipient outcome summary returned by fan-out operations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bizhub.domain.errors import WriteError

from .notification import Notification
from .recipient import Recipient


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of a single notification write."""

    recipient: Recipient
    notification: Notification | None = None
    error: WriteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DispatchReport:
    """Ordered outcomes of a fan-out, one entry per requested recipient."""

    outcomes: Sequence[DispatchOutcome] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[DispatchOutcome]:
        return iter(self.outcomes)

    @property
    def succeeded(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        """Return ``True`` when every write succeeded (vacuously for no recipients)."""

        return not self.failed


__all__ = ["DispatchOutcome", "DispatchReport"]
