from __future__ import annotations

from decimal import Decimal

import pytest

from coin_value.utils.decimal_tools import as_decimal, shift_to_units, truncating_div, units_to_decimal


def test_as_decimal_converts_supported_types():
    assert as_decimal(Decimal("1.25")) == Decimal("1.25")
    assert as_decimal("1.25") == Decimal("1.25")
    assert as_decimal(3) == Decimal(3)
    # Floats go through `str` to avoid binary noise
    assert as_decimal(0.1) == Decimal("0.1")


@pytest.mark.parametrize("value", ["", "1,5", "NaN", "sNaN", "Infinity", False, None, [1]])
def test_as_decimal_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        as_decimal(value)


def test_shift_to_units_does_not_lose_digits_beyond_default_context():
    # 60 significant digits, well above the default context precision of 28
    value = Decimal("1234567890" * 5 + ".1234567890")
    assert shift_to_units(value, 10) == int("1234567890" * 6)


def test_shift_to_units_rejects_result_beyond_exponent_range():
    with pytest.raises(ValueError, match="out of range"):
        shift_to_units(Decimal("1e999999"), 18)


def test_units_to_decimal_quantizes_half_away_from_zero():
    assert units_to_decimal(15, 3, 2) == Decimal("0.02")
    assert units_to_decimal(-15, 3, 2) == Decimal("-0.02")
    assert units_to_decimal(14, 3, 2) == Decimal("0.01")
    assert units_to_decimal(10**40, 18, 18) == Decimal(10**22)


@pytest.mark.parametrize("dividend, divisor, expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)])
def test_truncating_div(dividend, divisor, expected):
    assert truncating_div(dividend, divisor) == expected
