"""HTTP routes for the InkMaster studio backend."""
from __future__ import annotations

import math

from flask import Blueprint, Flask, current_app, jsonify, request

from . import pricing
from .extensions import studio
from .models import AppointmentDraft, ClientDraft, PriceEstimateDraft
from .studio import (APPOINTMENT_CREATED_MESSAGE, APPOINTMENT_REQUIRED_MESSAGE,
                     CLIENT_CREATED_MESSAGE, CLIENT_REQUIRED_MESSAGE)

bp = Blueprint("api", __name__)

NUMERIC_FIELDS = frozenset({"price", "hours", "hourly_rate"})


def _coerce_fields(payload: dict[str, object], draft_cls: type) -> dict[str, object]:
    """Turn a JSON body into draft field changes.

    Raises TypeError for unknown fields and ValueError for numbers that do
    not parse or are not finite.
    """
    unknown = set(payload) - draft_cls.field_names()
    if unknown:
        raise TypeError(f"unknown fields: {', '.join(sorted(unknown))}")

    changes: dict[str, object] = {}
    for name, value in payload.items():
        if name in NUMERIC_FIELDS:
            number = float(value) if value not in (None, "") else 0
            if not math.isfinite(number):
                raise ValueError(f"{name} must be a finite number")
            changes[name] = number
        else:
            changes[name] = "" if value is None else str(value)
    return changes


def _invalid_payload(exc: Exception) -> tuple[object, int]:
    current_app.logger.warning(f"Invalid payload: {exc}")
    return jsonify({"error": "invalid_payload", "message": str(exc)}), 400


def _notice(level: str, message: str) -> dict[str, str]:
    return {"level": level, "message": message}


@bp.get("/health")
def health_check() -> tuple[dict[str, str], int]:
    """
    Expose a simple uptime check endpoint.
    ---
    tags:
      - Health
    responses:
      200:
        description: Service is healthy and running.
    """
    return jsonify({"status": "ok"}), 200


@bp.get("/dashboard")
def dashboard() -> tuple[dict[str, object], int]:
    """Summary counts, revenue and the most recent appointments.
    ---
    tags:
      - Dashboard
    responses:
      200:
        description: Dashboard summary
    """
    return jsonify(studio.state.dashboard()), 200


# Appointments


@bp.get("/appointments")
def list_appointments() -> tuple[dict[str, object], int]:
    return jsonify({"appointments": [a.to_dict() for a in studio.state.appointments]}), 200


@bp.get("/appointments/today")
def list_todays_appointments() -> tuple[dict[str, object], int]:
    state = studio.state
    return (
        jsonify({
            "date": state.today(),
            "appointments": [a.to_dict() for a in state.todays_appointments()],
        }),
        200,
    )


@bp.get("/appointments/draft")
def get_appointment_draft() -> tuple[dict[str, object], int]:
    return jsonify({"draft": studio.state.appointment_draft.to_dict()}), 200


@bp.patch("/appointments/draft")
def update_appointment_draft() -> tuple[dict[str, object], int]:
    """Edit fields of the appointment form without committing them.
    ---
    tags:
      - Appointments
    parameters:
      - in: body
        name: body
        schema:
          properties:
            client_name:
              type: string
            date:
              type: string
              example: "2024-01-15"
            time:
              type: string
              example: "14:00"
            service:
              type: string
            price:
              type: number
            notes:
              type: string
    responses:
      200:
        description: Updated draft
      400:
        description: Unknown field or invalid price
    """
    payload = request.get_json(silent=True) or {}
    try:
        draft = studio.state.update_appointment_draft(**_coerce_fields(payload, AppointmentDraft))
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)
    return jsonify({"draft": draft.to_dict()}), 200


@bp.post("/appointments")
def create_appointment() -> tuple[dict[str, object], int]:
    """Schedule an appointment from the draft plus any fields in the body.
    ---
    tags:
      - Appointments
    responses:
      201:
        description: Appointment scheduled successfully
      400:
        description: Missing client name, date or time
    """
    payload = request.get_json(silent=True) or {}
    state = studio.state
    try:
        state.update_appointment_draft(**_coerce_fields(payload, AppointmentDraft))
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)

    appointment = state.add_appointment()
    if appointment is None:
        return jsonify({"error": "invalid_payload", "message": APPOINTMENT_REQUIRED_MESSAGE}), 400

    return (
        jsonify({
            "appointment": appointment.to_dict(),
            "notification": _notice("success", APPOINTMENT_CREATED_MESSAGE),
        }),
        201,
    )


# Clients


@bp.get("/clients")
def list_clients() -> tuple[dict[str, object], int]:
    return jsonify({"clients": [c.to_dict() for c in studio.state.clients]}), 200


@bp.get("/clients/draft")
def get_client_draft() -> tuple[dict[str, object], int]:
    return jsonify({"draft": studio.state.client_draft.to_dict()}), 200


@bp.patch("/clients/draft")
def update_client_draft() -> tuple[dict[str, object], int]:
    payload = request.get_json(silent=True) or {}
    try:
        draft = studio.state.update_client_draft(**_coerce_fields(payload, ClientDraft))
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)
    return jsonify({"draft": draft.to_dict()}), 200


@bp.post("/clients")
def create_client() -> tuple[dict[str, object], int]:
    """Add a client from the draft plus any fields in the body.
    ---
    tags:
      - Clients
    parameters:
      - in: body
        name: body
        schema:
          properties:
            name:
              type: string
            email:
              type: string
            phone:
              type: string
    responses:
      201:
        description: Client added successfully
      400:
        description: Missing name or email
    """
    payload = request.get_json(silent=True) or {}
    state = studio.state
    try:
        state.update_client_draft(**_coerce_fields(payload, ClientDraft))
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)

    client = state.add_client()
    if client is None:
        return jsonify({"error": "invalid_payload", "message": CLIENT_REQUIRED_MESSAGE}), 400

    return jsonify({"client": client.to_dict(), "notification": _notice("success", CLIENT_CREATED_MESSAGE)}), 201


# Portfolio


@bp.get("/portfolio")
def list_portfolio() -> tuple[dict[str, object], int]:
    return jsonify({"portfolio": [p.to_dict() for p in studio.state.portfolio]}), 200


# Pricing


@bp.get("/services")
def list_service_options() -> tuple[dict[str, object], int]:
    return jsonify({"services": pricing.options_payload(pricing.SERVICE_OPTIONS)}), 200


@bp.get("/pricing")
def pricing_overview() -> tuple[dict[str, object], int]:
    """Estimator options, the pricing guide and the current estimate.
    ---
    tags:
      - Pricing
    responses:
      200:
        description: Pricing overview
    """
    state = studio.state
    return (
        jsonify({
            "sizes": pricing.options_payload(pricing.SIZE_OPTIONS),
            "complexities": pricing.options_payload(pricing.COMPLEXITY_OPTIONS),
            "guide": pricing.PRICING_GUIDE,
            "draft": state.price_draft.to_dict(),
            "estimated_price": state.estimated_price(),
        }),
        200,
    )


@bp.patch("/pricing/estimate")
def update_price_estimate() -> tuple[dict[str, object], int]:
    payload = request.get_json(silent=True) or {}
    state = studio.state
    try:
        draft = state.update_price_draft(**_coerce_fields(payload, PriceEstimateDraft))
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)
    return jsonify({"draft": draft.to_dict(), "estimated_price": state.estimated_price()}), 200


@bp.post("/pricing/estimate")
def calculate_estimate() -> tuple[dict[str, object], int]:
    """Price a piece from explicit values without touching the estimator form.
    ---
    tags:
      - Pricing
    parameters:
      - in: body
        name: body
        schema:
          properties:
            size:
              type: string
              enum: [small, medium, large, xlarge]
            complexity:
              type: string
              enum: [simple, moderate, complex, detailed]
            hours:
              type: number
            hourly_rate:
              type: number
    responses:
      200:
        description: Estimated price
      400:
        description: Non-numeric hours or rate
    """
    payload = request.get_json(silent=True) or {}
    try:
        values = _coerce_fields(payload, PriceEstimateDraft)
    except (TypeError, ValueError) as exc:
        return _invalid_payload(exc)

    estimate = PriceEstimateDraft(hourly_rate=studio.state.default_hourly_rate).with_changes(**values)
    price = pricing.calculate_price(estimate.size, estimate.complexity, estimate.hours, estimate.hourly_rate)
    return jsonify({"estimated_price": price}), 200


# Notifications


@bp.get("/notifications")
def list_notifications() -> tuple[dict[str, object], int]:
    history = studio.state.notifier.history()
    return jsonify({"notifications": [n.to_dict() for n in history]}), 200


def register_routes(app: Flask) -> None:
    app.register_blueprint(bp)
