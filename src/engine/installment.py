"""Derive the per-period installment from whichever input the user supplied.

The solver only understands a fixed installment; these adapters turn a total
interest figure or a flat interest-rate percentage into one.
"""

from src.engine.errors import InvalidInputError
from src.models.loan import CalculationMode


def installment_from_amount(installment: float) -> float:
    return installment


def installment_from_total_interest(principal: float, periods: int, total_interest: float) -> float:
    """Spread principal plus total interest evenly over all periods."""
    _check_periods(periods)
    return (principal + total_interest) / periods


def installment_from_rate_percent(principal: float, periods: int, rate_percent: float) -> float:
    """Flat rate: interest = principal * rate_percent / 100 over the whole term.

    e.g. 1000 over 12 periods at 14% -> (1000 + 140) / 12 = 95.
    """
    _check_periods(periods)
    total_interest = principal * (rate_percent / 100)
    return (principal + total_interest) / periods


def derive_installment(
    mode: CalculationMode,
    principal: float,
    periods: int,
    *,
    installment: float | None = None,
    total_interest: float | None = None,
    interest_rate_percent: float | None = None,
) -> float | None:
    """Installment for `mode`, or None if that mode's input is missing."""
    if mode == CalculationMode.BY_INSTALLMENT:
        if installment is None:
            return None
        return installment_from_amount(installment)
    if mode == CalculationMode.BY_TOTAL_INTEREST:
        if total_interest is None:
            return None
        return installment_from_total_interest(principal, periods, total_interest)
    if mode == CalculationMode.BY_INTEREST_RATE:
        if interest_rate_percent is None:
            return None
        return installment_from_rate_percent(principal, periods, interest_rate_percent)
    raise ValueError(f"Unknown calculation mode: {mode!r}")


def _check_periods(periods: int) -> None:
    if periods <= 0:
        raise InvalidInputError("Periods must be positive")
