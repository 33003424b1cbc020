from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def tax(self, basic: Decimal) -> Decimal:
        raise NotImplementedError

    def net(self, basic: Decimal) -> Decimal:
        return basic - self.tax(basic)
