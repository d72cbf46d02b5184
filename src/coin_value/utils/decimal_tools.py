from __future__ import annotations

from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Round-half-away-from-zero. Used for every decimal <-> units boundary.
ROUNDING = ROUND_HALF_UP


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        ValueError: If $value cannot be parsed or is NaN / infinite.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert $value ({value}) to Decimal because bool is not a number")

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot convert $value ({value!r}) to Decimal") from e

    # Raise: NaN and infinity have no smallest-unit representation
    if not result.is_finite():
        raise ValueError(f"Cannot convert $value ({value}) to Decimal because it is not finite")

    return result


def _precision_for(value: Decimal, shift: int) -> int:
    # Enough digits that neither scaleb nor quantize have to round
    return len(value.as_tuple().digits) + abs(shift) + abs(value.as_tuple().exponent) + 2


def shift_to_units(value: Decimal, shift: int) -> int:
    """Multiply $value by 10**$shift and round to an integer (half away from zero).

    Raises:
        ValueError: If the shifted value exceeds the decimal exponent range.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(value, shift))
        ctx.rounding = ROUNDING
        try:
            shifted = value.scaleb(shift)
        except Overflow as e:
            raise ValueError(f"Cannot convert $value ({value}) to units because it is out of range") from e
        return int(shifted.to_integral_value(rounding=ROUNDING))


def units_to_decimal(units: int, shift: int, places: int) -> Decimal:
    """Return $units / 10**$shift quantized to $places decimal places.

    The result is exact except for the final quantize, which rounds half away from zero.
    """
    value = Decimal(units)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(value, shift) + places)
        ctx.rounding = ROUNDING
        return value.scaleb(-shift).quantize(Decimal(1).scaleb(-places), rounding=ROUNDING)


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division that truncates toward zero (unlike `//`, which floors).

    Examples:
        >>> truncating_div(7, 2)
        3
        >>> truncating_div(-7, 2)
        -3
    """
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient
