from dataclasses import dataclass
from enum import Enum


class CalculationMode(str, Enum):
    """Which secondary input the caller supplied alongside principal and periods."""
    BY_INSTALLMENT = "by_installment"
    BY_TOTAL_INTEREST = "by_total_interest"
    BY_INTEREST_RATE = "by_interest_rate"


@dataclass(frozen=True)
class LoanInputs:
    principal: float
    periods: int
    installment: float
    periods_per_year: int = 12  # Only used to annualize the periodic rate

    @property
    def total_paid(self) -> float:
        return self.installment * self.periods


@dataclass(frozen=True)
class LoanResult:
    total_paid: float
    total_interest: float  # Negative when payments fall short of principal
    periodic_rate: float
    nominal_apr: float  # periodic_rate * periods_per_year
    effective_apr: float  # Compounded over periods_per_year
