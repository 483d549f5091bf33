# This project was developed with assistance from AI tools.
"""Number formatting shared by finding descriptions and console output."""

from decimal import ROUND_HALF_UP, Decimal


def format_number(value: float) -> str:
    """Render a number in plain decimal form.

    Whole values drop the trailing '.0'; no exponent notation is used
    (1e-05 renders as 0.00001).
    """
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def round_half_up(value: float) -> int:
    """Round to a whole number with halves going up (4.5 -> 5, 10.5 -> 11)."""
    return int(Decimal(repr(float(value))).quantize(Decimal("1"), ROUND_HALF_UP))
