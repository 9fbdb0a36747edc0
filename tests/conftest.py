"""Canonical loans used across engine tests.

Fixture: $1,000 financed over 12 monthly installments of $95 (14% flat).
"""

import pytest

from src.models.loan import LoanInputs


@pytest.fixture
def canonical_loan() -> LoanInputs:
    """$1,000 over 12 periods at $95 per period."""
    return LoanInputs(principal=1000.0, periods=12, installment=95.0)


@pytest.fixture
def interest_free_loan() -> LoanInputs:
    """10 installments of $100 on $1,000: no interest at all."""
    return LoanInputs(principal=1000.0, periods=10, installment=100.0)


@pytest.fixture
def mortgage_loan() -> LoanInputs:
    """$400K, 360 payments of $2,661.21 (7% nominal)."""
    return LoanInputs(principal=400000.0, periods=360, installment=2661.21)
