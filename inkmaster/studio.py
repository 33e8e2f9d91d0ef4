"""The studio controller: authoritative collections, drafts and derived views.

``StudioApp`` is the only holder of domain state. Collections and drafts are
tuples of frozen dataclasses and every mutation replaces them wholesale, so a
reader never sees a partially updated collection.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from datetime import date

from . import pricing
from .errors import ValidationError
from .models import (NEVER_VISITED, Appointment, AppointmentDraft, Client,
                     ClientDraft, PortfolioPiece, PriceEstimateDraft, today_iso)
from .notifications import NotificationLog, NotificationSink
from .seed import SEED_APPOINTMENTS, SEED_CLIENTS, SEED_PORTFOLIO

logger = logging.getLogger(__name__)

APPOINTMENT_REQUIRED_MESSAGE = "Please fill in all required fields"
APPOINTMENT_CREATED_MESSAGE = "Appointment scheduled successfully!"
CLIENT_REQUIRED_MESSAGE = "Please fill in name and email"
CLIENT_CREATED_MESSAGE = "Client added successfully!"

STATUS_COLORS: dict[str, str] = {
    "scheduled": "blue",
    "completed": "green",
    "cancelled": "red",
}
FALLBACK_STATUS_COLOR = "gray"

RECENT_APPOINTMENTS_LIMIT = 3


def status_color(status: str) -> str:
    """Badge color for an appointment status; unknown statuses render gray."""
    return STATUS_COLORS.get(status, FALLBACK_STATUS_COLOR)


def validate_appointment_draft(draft: AppointmentDraft) -> None:
    if draft.missing_required():
        raise ValidationError(APPOINTMENT_REQUIRED_MESSAGE)


def validate_client_draft(draft: ClientDraft) -> None:
    if draft.missing_required():
        raise ValidationError(CLIENT_REQUIRED_MESSAGE)


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class StudioApp:
    def __init__(
        self,
        *,
        studio_name: str = "InkMaster Studio",
        default_hourly_rate: float = 150,
        appointments: Iterable[Appointment] = (),
        clients: Iterable[Client] = (),
        portfolio: Iterable[PortfolioPiece] = (),
        notifier: NotificationSink | None = None,
        clock: Callable[[], date] = date.today,
        millis: Callable[[], int] = _epoch_millis,
    ) -> None:
        self.studio_name = studio_name
        self.default_hourly_rate = default_hourly_rate
        self.notifier: NotificationSink = notifier if notifier is not None else NotificationLog()
        self._clock = clock
        self._millis = millis

        self._appointments: tuple[Appointment, ...] = tuple(appointments)
        self._clients: tuple[Client, ...] = tuple(clients)
        self._portfolio: tuple[PortfolioPiece, ...] = tuple(portfolio)

        self._appointment_draft = AppointmentDraft()
        self._client_draft = ClientDraft()
        self._price_draft = self._empty_price_draft()

    @classmethod
    def from_config(cls, config: Mapping[str, object], **overrides: object) -> StudioApp:
        """Build a studio from Flask-style configuration keys."""
        seeded = bool(config.get("SEED_DEMO_DATA", True))
        options: dict[str, object] = {
            "studio_name": config.get("STUDIO_NAME", "InkMaster Studio"),
            "default_hourly_rate": config.get("DEFAULT_HOURLY_RATE", 150),
            "notifier": NotificationLog(int(config.get("NOTIFICATION_HISTORY", 50))),
        }
        if seeded:
            options.update(
                appointments=SEED_APPOINTMENTS,
                clients=SEED_CLIENTS,
                portfolio=SEED_PORTFOLIO,
            )
        options.update(overrides)
        return cls(**options)

    # Authoritative collections (read-only views)

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return self._appointments

    @property
    def clients(self) -> tuple[Client, ...]:
        return self._clients

    @property
    def portfolio(self) -> tuple[PortfolioPiece, ...]:
        return self._portfolio

    # Draft-entry state

    @property
    def appointment_draft(self) -> AppointmentDraft:
        return self._appointment_draft

    @property
    def client_draft(self) -> ClientDraft:
        return self._client_draft

    @property
    def price_draft(self) -> PriceEstimateDraft:
        return self._price_draft

    def update_appointment_draft(self, **changes: object) -> AppointmentDraft:
        self._appointment_draft = self._appointment_draft.with_changes(**changes)
        return self._appointment_draft

    def update_client_draft(self, **changes: object) -> ClientDraft:
        self._client_draft = self._client_draft.with_changes(**changes)
        return self._client_draft

    def update_price_draft(self, **changes: object) -> PriceEstimateDraft:
        self._price_draft = self._price_draft.with_changes(**changes)
        return self._price_draft

    def _empty_price_draft(self) -> PriceEstimateDraft:
        return PriceEstimateDraft(hourly_rate=self.default_hourly_rate)

    # Mutations

    def add_appointment(self, draft: AppointmentDraft | None = None) -> Appointment | None:
        """Schedule an appointment from ``draft`` (or the held draft).

        Returns the new appointment, or ``None`` after notifying the user when
        the client name, date or time is missing.
        """
        draft = draft if draft is not None else self._appointment_draft
        try:
            validate_appointment_draft(draft)
        except ValidationError as exc:
            self.notifier.error(exc.message)
            return None

        appointment = Appointment(
            id=self._new_id(a.id for a in self._appointments),
            client_name=draft.client_name,
            date=draft.date,
            time=draft.time,
            service=draft.service,
            status="scheduled",
            price=draft.price,
            notes=draft.notes,
        )
        self._appointments = (*self._appointments, appointment)
        self._appointment_draft = AppointmentDraft()
        logger.info("Scheduled appointment %s for %s", appointment.id, appointment.client_name)
        self.notifier.success(APPOINTMENT_CREATED_MESSAGE)
        return appointment

    def add_client(self, draft: ClientDraft | None = None) -> Client | None:
        draft = draft if draft is not None else self._client_draft
        try:
            validate_client_draft(draft)
        except ValidationError as exc:
            self.notifier.error(exc.message)
            return None

        client = Client(
            id=self._new_id(c.id for c in self._clients),
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
            total_sessions=0,
            total_spent=0,
            last_visit=NEVER_VISITED,
        )
        self._clients = (*self._clients, client)
        self._client_draft = ClientDraft()
        logger.info("Added client %s", client.id)
        self.notifier.success(CLIENT_CREATED_MESSAGE)
        return client

    def _new_id(self, existing: Iterable[str]) -> str:
        taken = set(existing)
        candidate = self._millis()
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # Derived views

    def today(self) -> str:
        return today_iso(self._clock())

    def todays_appointments(self) -> list[Appointment]:
        today = self.today()
        return [a for a in self._appointments if a.date == today]

    def total_revenue(self) -> float:
        return sum(a.price for a in self._appointments if a.status == "completed")

    def recent_appointments(self, limit: int = RECENT_APPOINTMENTS_LIMIT) -> list[Appointment]:
        # storage order, not date order
        return list(self._appointments[:limit])

    def estimated_price(self) -> int:
        draft = self._price_draft
        return pricing.calculate_price(draft.size, draft.complexity, draft.hours, draft.hourly_rate)

    def dashboard(self) -> dict[str, object]:
        todays = self.todays_appointments()
        return {
            "studio_name": self.studio_name,
            "date": self.today(),
            "total_clients": len(self._clients),
            "todays_appointment_count": len(todays),
            "todays_appointments": [a.to_dict() for a in todays],
            "total_revenue": self.total_revenue(),
            "portfolio_count": len(self._portfolio),
            "recent_appointments": [
                {**a.to_dict(), "status_color": status_color(a.status)}
                for a in self.recent_appointments()
            ],
        }
