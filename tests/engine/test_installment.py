import pytest

from src.engine.errors import InvalidInputError
from src.engine.installment import (
    derive_installment,
    installment_from_amount,
    installment_from_rate_percent,
    installment_from_total_interest,
)
from src.models.loan import CalculationMode


class TestInstallmentFromAmount:
    def test_passthrough(self):
        assert installment_from_amount(95.0) == 95.0


class TestInstallmentFromTotalInterest:
    def test_basic(self):
        assert installment_from_total_interest(1000.0, 12, 140.0) == pytest.approx(95.0)

    def test_zero_interest(self):
        assert installment_from_total_interest(1000.0, 10, 0.0) == pytest.approx(100.0)

    def test_zero_periods(self):
        with pytest.raises(InvalidInputError):
            installment_from_total_interest(1000.0, 0, 140.0)


class TestInstallmentFromRatePercent:
    def test_flat_rate(self):
        """14% of $1,000 over 12 periods = $95/period."""
        assert installment_from_rate_percent(1000.0, 12, 14.0) == pytest.approx(95.0)

    def test_zero_rate(self):
        assert installment_from_rate_percent(1200.0, 12, 0.0) == pytest.approx(100.0)

    def test_negative_periods(self):
        with pytest.raises(InvalidInputError):
            installment_from_rate_percent(1000.0, -1, 14.0)


class TestDeriveInstallment:
    def test_by_installment(self):
        assert derive_installment(CalculationMode.BY_INSTALLMENT, 1000.0, 12, installment=95.0) == 95.0

    def test_by_total_interest(self):
        pmt = derive_installment(CalculationMode.BY_TOTAL_INTEREST, 1000.0, 12, total_interest=140.0)
        assert pmt == pytest.approx(95.0)

    def test_by_interest_rate(self):
        pmt = derive_installment(CalculationMode.BY_INTEREST_RATE, 1000.0, 12, interest_rate_percent=14.0)
        assert pmt == pytest.approx(95.0)

    def test_ignores_other_modes_inputs(self):
        """Only the selected mode's input is read."""
        pmt = derive_installment(
            CalculationMode.BY_TOTAL_INTEREST, 1000.0, 12,
            installment=500.0, total_interest=140.0, interest_rate_percent=99.0,
        )
        assert pmt == pytest.approx(95.0)

    @pytest.mark.parametrize("mode", list(CalculationMode))
    def test_missing_input_returns_none(self, mode):
        assert derive_installment(mode, 1000.0, 12) is None

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            derive_installment("monthly", 1000.0, 12, installment=95.0)
