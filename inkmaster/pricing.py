"""Price estimation and the catalogue options shown alongside it."""
from __future__ import annotations

import math

# Unlisted sizes and complexities price at a multiplier of 1.
SIZE_MULTIPLIERS: dict[str, float] = {
    "small": 0.8,
    "medium": 1.0,
    "large": 1.3,
    "xlarge": 1.6,
}

COMPLEXITY_MULTIPLIERS: dict[str, float] = {
    "simple": 0.9,
    "moderate": 1.0,
    "complex": 1.3,
    "detailed": 1.5,
}

DEFAULT_MULTIPLIER = 1.0

SIZE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("small", "Small (2-4 inches)"),
    ("medium", "Medium (4-6 inches)"),
    ("large", "Large (6-8 inches)"),
    ("xlarge", "X-Large (8+ inches)"),
)

COMPLEXITY_OPTIONS: tuple[tuple[str, str], ...] = (
    ("simple", "Simple (minimal detail)"),
    ("moderate", "Moderate (some detail)"),
    ("complex", "Complex (high detail)"),
    ("detailed", "Very Detailed (intricate)"),
)

SERVICE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("small", "Small Tattoo (1-3 hours)"),
    ("medium", "Medium Tattoo (3-6 hours)"),
    ("large", "Large Tattoo (6+ hours)"),
    ("touch-up", "Touch-up Session"),
    ("consultation", "Consultation"),
)

PRICING_GUIDE: dict[str, list[dict[str, str]] | list[str]] = {
    "size_categories": [
        {"size": "Small (2-4\")", "range": "$80-200"},
        {"size": "Medium (4-6\")", "range": "$200-500"},
        {"size": "Large (6-8\")", "range": "$500-1000"},
        {"size": "X-Large (8+\")", "range": "$1000+"},
    ],
    "additional_factors": [
        "Color vs Black & Gray",
        "Placement difficulty",
        "Design complexity",
        "Touch-up sessions",
    ],
}


def size_multiplier(size: str) -> float:
    return SIZE_MULTIPLIERS.get(size, DEFAULT_MULTIPLIER)


def complexity_multiplier(complexity: str) -> float:
    return COMPLEXITY_MULTIPLIERS.get(complexity, DEFAULT_MULTIPLIER)


def calculate_price(size: str, complexity: str, hours: float, hourly_rate: float) -> int:
    """Estimate the price of a piece.

    Returns 0 when ``size`` or ``complexity`` is unset, ``hours`` is zero, or
    the inputs do not multiply out to a finite number.
    Otherwise the hourly base price is scaled by the size and complexity
    multipliers and rounded with the built-in ``round``.
    """
    if not size or not complexity or hours == 0:
        return 0

    base_price = hours * hourly_rate
    price = base_price * size_multiplier(size) * complexity_multiplier(complexity)
    if not math.isfinite(price):
        return 0
    return round(price)


def options_payload(options: tuple[tuple[str, str], ...]) -> list[dict[str, str]]:
    return [{"value": value, "label": label} for value, label in options]
