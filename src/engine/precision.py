"""Decimal arithmetic policy shared by every engine module.

The policy is an immutable value. Engine code enters it through
``decimal.localcontext`` so the caller's thread context is never touched.
"""

from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext

from src.config import settings

TWO_PLACES = Decimal("0.01")
WHOLE = Decimal("1")
ZERO = Decimal("0")


@dataclass(frozen=True)
class DecimalPolicy:
    precision: int = 20
    rounding: str = ROUND_HALF_UP

    def context(self) -> Context:
        return Context(prec=self.precision, rounding=self.rounding)

    def enter(self):
        """Context manager applying this policy to the current block."""
        return localcontext(self.context())


MONEY = DecimalPolicy(precision=settings.decimal_precision)


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)
