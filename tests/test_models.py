"""Tests for record invariants and draft handling."""
from __future__ import annotations

from datetime import date

import pytest

from inkmaster.errors import ValidationError
from inkmaster.models import (Appointment, AppointmentDraft, Client, ClientDraft,
                              PriceEstimateDraft, today_iso)


def test_appointment_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        Appointment(id="9", client_name="Kai", date="2024-02-01", time="12:00", status="pending")


def test_appointment_rejects_negative_price() -> None:
    with pytest.raises(ValidationError):
        Appointment(id="9", client_name="Kai", date="2024-02-01", time="12:00", price=-1)


def test_client_rejects_negative_total_spent() -> None:
    with pytest.raises(ValidationError):
        Client(id="9", name="Kai", email="kai@example.com", total_spent=-10)


def test_new_client_defaults() -> None:
    client = Client(id="9", name="Kai", email="kai@example.com")

    assert client.total_sessions == 0
    assert client.total_spent == 0
    assert client.last_visit == "Never"
    assert client.phone == ""


def test_draft_changes_return_a_new_draft() -> None:
    draft = AppointmentDraft()

    changed = draft.with_changes(client_name="Kai", price=120)

    assert draft == AppointmentDraft()
    assert changed.client_name == "Kai"
    assert changed.price == 120


def test_draft_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError):
        ClientDraft().with_changes(address="1 Main St")


def test_draft_required_fields() -> None:
    assert AppointmentDraft(client_name="Kai", date="2024-02-01").missing_required()
    assert not AppointmentDraft(client_name="Kai", date="2024-02-01", time="12:00").missing_required()
    assert ClientDraft(name="Kai").missing_required()
    assert not ClientDraft(name="Kai", email="kai@example.com").missing_required()


def test_price_draft_defaults() -> None:
    assert PriceEstimateDraft().to_dict() == {
        "size": "",
        "complexity": "",
        "hours": 0,
        "hourly_rate": 150,
    }


def test_today_iso_formats_dates() -> None:
    assert today_iso(date(2024, 3, 9)) == "2024-03-09"


@pytest.mark.parametrize("price", [float("nan"), float("inf")])
def test_appointment_rejects_non_finite_price(price) -> None:
    with pytest.raises(ValidationError):
        Appointment(id="9", client_name="Kai", date="2024-02-01", time="12:00", price=price)
