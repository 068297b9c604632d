# campus_energy/core/units.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float, str]

TWO_PLACES = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """
    Convert a user-facing number to Decimal.

    Floats go through their shortest repr so 2.2 becomes Decimal("2.2")
    rather than the binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not energy quantities")
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round2(value: Number) -> Decimal:
    """Half-up rounding to 2 decimal places, for presentation and savings."""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
