"""Money helpers shared by the calculators."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a number to Decimal via its string form (avoids binary float noise)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Decimal | int | float | str) -> Decimal:
    """Round to the cent, halves away from zero (never banker's rounding)."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
