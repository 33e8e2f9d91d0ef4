"""Record and draft types for the InkMaster studio backend."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from datetime import date
from typing import Literal

from .errors import ValidationError

AppointmentStatus = Literal["scheduled", "completed", "cancelled"]

STATUSES: tuple[str, ...] = ("scheduled", "completed", "cancelled")

NEVER_VISITED = "Never"


def today_iso(today: date | None = None) -> str:
    """Return the given (or current local) date as ``YYYY-MM-DD``."""
    return (today or date.today()).isoformat()


def _check_amount(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name} must be a finite number >= 0")


@dataclass(frozen=True)
class Appointment:
    id: str
    client_name: str
    date: str
    time: str
    service: str = ""
    status: AppointmentStatus = "scheduled"
    price: float = 0
    notes: str = ""

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValidationError(f"status must be one of {', '.join(STATUSES)}")
        _check_amount("price", self.price)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Client:
    id: str
    name: str
    email: str
    phone: str = ""
    total_sessions: int = 0
    total_spent: float = 0
    last_visit: str = NEVER_VISITED

    def __post_init__(self) -> None:
        _check_amount("total_spent", self.total_spent)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class PortfolioPiece:
    """A showcase entry. Seed data only; nothing creates or edits pieces."""

    id: str
    title: str
    style: str
    size: str
    description: str
    image_url: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


class _Draft:
    """Shared behavior for the per-form draft-entry state."""

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def with_changes(self, **changes: object):
        """Return a copy with ``changes`` applied; unknown names raise TypeError."""
        unknown = set(changes) - self.field_names()
        if unknown:
            raise TypeError(f"unknown draft fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class AppointmentDraft(_Draft):
    client_name: str = ""
    date: str = ""
    time: str = ""
    service: str = ""
    price: float = 0
    notes: str = ""

    def __post_init__(self) -> None:
        _check_amount("price", self.price)

    def missing_required(self) -> bool:
        return not self.client_name or not self.date or not self.time


@dataclass(frozen=True)
class ClientDraft(_Draft):
    name: str = ""
    email: str = ""
    phone: str = ""

    def missing_required(self) -> bool:
        return not self.name or not self.email


@dataclass(frozen=True)
class PriceEstimateDraft(_Draft):
    size: str = ""
    complexity: str = ""
    hours: float = 0
    hourly_rate: float = 150
