"""Implied periodic rate of a fixed-installment loan.

Pure functions. No I/O.

Solves the annuity NPV equation for the per-period rate by bisection, then
annualizes it into nominal and effective APR.
"""

import logging
import math

from src.engine.errors import InvalidInputError, RateBoundsExceededError
from src.models.loan import LoanInputs, LoanResult

logger = logging.getLogger(__name__)

PRECISION = 1e-9
MAX_ITERATIONS = 10_000
RATE_CEILING = 1e6  # 100,000,000% per period


def _validate(inputs: LoanInputs) -> None:
    if not inputs.principal > 0:
        raise InvalidInputError("Principal must be positive")
    if not inputs.periods > 0:
        raise InvalidInputError("Periods must be positive")
    if not inputs.installment > 0:
        raise InvalidInputError("Installment must be positive")
    if not inputs.periods_per_year > 0:
        raise InvalidInputError("Periods per year must be positive")


def npv(rate: float, inputs: LoanInputs) -> float:
    """Principal minus the present value of all installments at `rate`.

    Negative means the guessed rate is too low. At rate 0 the limit
    principal - installment * periods is used.
    """
    if rate == 0:
        return inputs.principal - inputs.installment * inputs.periods
    # PV of an annuity-immediate: PMT * (1 - (1+r)^-n) / r
    return inputs.principal - inputs.installment * (1 - (1 + rate) ** -inputs.periods) / rate


def _bracket(inputs: LoanInputs) -> tuple[float, float]:
    """Double the upper rate until NPV turns non-negative."""
    low, high = 0.0, 1.0
    while npv(high, inputs) < 0:
        low = high
        high *= 2
        if high > RATE_CEILING:
            logger.warning(
                "No rate bracket below %.0f for principal=%s periods=%s installment=%s",
                RATE_CEILING, inputs.principal, inputs.periods, inputs.installment,
            )
            raise RateBoundsExceededError("Could not find an upper bound for the interest rate.")
    return low, high


def solve_periodic_rate(inputs: LoanInputs) -> float:
    """Bisect NPV for its positive root.

    Assumes installment * periods > principal, so NPV(0) < 0 and the root is
    unique. Returns the midpoint of the last bracket if the iteration budget
    runs out.
    """
    low, high = _bracket(inputs)

    for _ in range(MAX_ITERATIONS):
        mid = (low + high) / 2
        # No representable float left between the bounds
        if mid == low or mid == high:
            return mid
        balance = npv(mid, inputs)
        if abs(balance) < PRECISION:
            return mid
        if balance < 0:
            low = mid
        else:
            high = mid

    logger.warning("Bisection did not converge in %d iterations, using midpoint", MAX_ITERATIONS)
    return (low + high) / 2


def _effective_apr(periodic_rate: float, periods_per_year: int) -> float:
    """(1 + r)^n - 1, or inf when the compounded factor overflows a float."""
    try:
        return math.pow(1 + periodic_rate, periods_per_year) - 1
    except OverflowError:
        return math.inf


def calculate(inputs: LoanInputs) -> LoanResult:
    """Solve the loan described by `inputs`.

    Raises:
        InvalidInputError: any input is non-positive
        RateBoundsExceededError: no finite rate up to RATE_CEILING balances the loan
    """
    _validate(inputs)

    total_paid = inputs.total_paid
    total_interest = total_paid - inputs.principal

    if total_paid <= inputs.principal + PRECISION:
        logger.debug("Payments do not exceed principal (%s <= %s), rate is zero", total_paid, inputs.principal)
        return LoanResult(
            total_paid=total_paid,
            total_interest=total_interest,
            periodic_rate=0.0,
            nominal_apr=0.0,
            effective_apr=0.0,
        )

    periodic_rate = solve_periodic_rate(inputs)
    logger.debug("Solved periodic rate %.10f for %s", periodic_rate, inputs)

    return LoanResult(
        total_paid=total_paid,
        total_interest=total_interest,
        periodic_rate=periodic_rate,
        nominal_apr=periodic_rate * inputs.periods_per_year,
        effective_apr=_effective_apr(periodic_rate, inputs.periods_per_year),
    )


def solve(
    principal: float,
    periods: int,
    installment: float,
    periods_per_year: int = 12,
) -> LoanResult:
    """Implied periodic rate, nominal APR and effective APR of a level-payment loan."""
    return calculate(LoanInputs(
        principal=principal,
        periods=periods,
        installment=installment,
        periods_per_year=periods_per_year,
    ))
