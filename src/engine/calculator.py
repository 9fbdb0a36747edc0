"""Request handling around the rate solver.

Validates the raw request, derives the installment for the selected mode,
runs the solver and turns solver failures into an error response.
"""

import logging

from src.engine.errors import LoanCalculationError
from src.engine.installment import derive_installment
from src.engine.rate_solver import solve
from src.models.request import AprRequest, AprResponse, LoanResultResponse

logger = logging.getLogger(__name__)

MISSING_LOAN_TERMS = "Enter a valid loan amount and number of periods"
MISSING_SECONDARY_INPUT = "Enter a valid installment, total interest or interest rate"


def run_calculation(request: AprRequest) -> AprResponse:
    principal = request.principal
    periods = request.periods

    if principal is None or periods is None or periods <= 0:
        logger.info("Rejected request without usable principal/periods: %s", request)
        return AprResponse(error=MISSING_LOAN_TERMS)

    installment = derive_installment(
        request.mode,
        principal,
        periods,
        installment=request.installment,
        total_interest=request.total_interest,
        interest_rate_percent=request.interest_rate_percent,
    )
    if installment is None or not installment > 0:
        logger.info("Rejected %s request, derived installment=%s", request.mode.value, installment)
        return AprResponse(error=MISSING_SECONDARY_INPUT)

    try:
        result = solve(principal, periods, installment, request.periods_per_year)
    except LoanCalculationError as e:
        logger.info("Calculation failed: %s", e)
        return AprResponse(error=str(e))

    return AprResponse(result=LoanResultResponse.from_result(result))
