"""Errors raised by the rate solver and its input adapters."""


class LoanCalculationError(Exception):
    """Base class for failures a caller can report back to the user."""


class InvalidInputError(LoanCalculationError, ValueError):
    """A loan input is non-positive. Raised before any computation."""


class RateBoundsExceededError(LoanCalculationError, ArithmeticError):
    """Bracket expansion passed the rate ceiling without a sign change in NPV."""
