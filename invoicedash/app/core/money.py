"""Currency conversion between major units and stored cents."""

from decimal import ROUND_HALF_UP, Decimal

CENTS_PER_UNIT = Decimal(100)
# Largest amount whose cents value fits a signed 64-bit integer
MAX_AMOUNT = Decimal("92233720368547758.07")


def to_cents(amount: Decimal) -> int:
    """Convert a major-unit amount to integer cents, rounding half up."""
    return int((Decimal(amount) * CENTS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP))
