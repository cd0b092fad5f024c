from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated

from pydantic import AfterValidator, Field

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


# Currency amounts travel and persist as exact decimals with two places.
Money = Annotated[Decimal, Field(ge=0), AfterValidator(to_cents)]


def as_money(value) -> Decimal:
    """Normalise a database aggregate (None, float, Decimal) to two places."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return to_cents(value)
