from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from ...core.constants import TAX_RATE
from .base import PayrollCalculator

CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to 2 places, halves away from zero (no banker's rounding).

    Precision grows with the magnitude so large salaries keep their cents.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: flat tax on basic salary, net = basic - tax, both to the cent."""

    def __init__(self, rate: Decimal = TAX_RATE):
        self._rate = Decimal(rate)

    @property
    def rate(self) -> Decimal:
        return self._rate

    def tax(self, basic: Decimal) -> Decimal:
        return round_money(basic * self._rate)

    def net(self, basic: Decimal) -> Decimal:
        return round_money(basic - self.tax(basic))
