"""Tests for the price estimator."""
from __future__ import annotations

import pytest

from inkmaster.pricing import (COMPLEXITY_MULTIPLIERS, SIZE_MULTIPLIERS,
                               calculate_price, complexity_multiplier,
                               options_payload, size_multiplier, SIZE_OPTIONS)


def test_medium_moderate_uses_plain_hourly_rate() -> None:
    assert calculate_price("medium", "moderate", 4, 150) == 600


def test_large_detailed_applies_both_multipliers() -> None:
    assert calculate_price("large", "detailed", 2, 100) == 390


@pytest.mark.parametrize(
    "size, complexity, hours, rate",
    [
        ("", "moderate", 5, 100),
        ("medium", "", 5, 100),
        ("xlarge", "simple", 0, 200),
    ],
)
def test_unset_inputs_price_at_zero(size, complexity, hours, rate) -> None:
    assert calculate_price(size, complexity, hours, rate) == 0


def test_unknown_size_and_complexity_fall_back_to_one() -> None:
    assert calculate_price("unknown", "unknown", 3, 100) == 300
    assert size_multiplier("huge") == 1
    assert complexity_multiplier("baroque") == 1


def test_small_simple_discounts() -> None:
    # 3 * 100 * 0.8 * 0.9 = 216
    assert calculate_price("small", "simple", 3, 100) == 216


def test_result_is_rounded_to_an_integer() -> None:
    price = calculate_price("xlarge", "complex", 1.5, 133)

    assert isinstance(price, int)
    assert price == round(1.5 * 133 * 1.6 * 1.3)


def test_ties_round_half_to_even() -> None:
    assert calculate_price("medium", "moderate", 0.5, 5) == 2
    assert calculate_price("medium", "moderate", 0.5, 7) == 4


def test_negative_hours_degrade_without_error() -> None:
    assert calculate_price("medium", "moderate", -2, 100) == -200


def test_same_inputs_give_same_price() -> None:
    results = {calculate_price("large", "complex", 6, 175) for _ in range(5)}

    assert results == {round(6 * 175 * 1.3 * 1.3)}


def test_multiplier_tables() -> None:
    assert SIZE_MULTIPLIERS == {"small": 0.8, "medium": 1.0, "large": 1.3, "xlarge": 1.6}
    assert COMPLEXITY_MULTIPLIERS == {"simple": 0.9, "moderate": 1.0, "complex": 1.3, "detailed": 1.5}


def test_options_payload_preserves_order() -> None:
    values = [option["value"] for option in options_payload(SIZE_OPTIONS)]

    assert values == ["small", "medium", "large", "xlarge"]


@pytest.mark.parametrize(
    "hours, rate",
    [(float("inf"), 100), (float("nan"), 100), (2, float("inf")), (1e308, 1e308)],
)
def test_non_finite_inputs_price_at_zero(hours, rate) -> None:
    assert calculate_price("large", "complex", hours, rate) == 0
