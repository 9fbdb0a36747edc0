"""Pydantic schemas for the calculator request/response boundary."""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.config import settings
from src.models.loan import CalculationMode, LoanResult


def _to_float(value):
    """Numeric strings become floats; blank or unparsable input becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            return None
    return value


def _to_int(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    return value


# ---- Request ----

class AprRequest(BaseModel):
    principal: float | None = Field(None, description="Loan amount financed")
    periods: int | None = Field(None, description="Number of equal payment periods")
    mode: CalculationMode = CalculationMode.BY_INSTALLMENT

    # Secondary input; only the one matching `mode` is read
    installment: float | None = None
    total_interest: float | None = None
    interest_rate_percent: float | None = None

    periods_per_year: int = Field(default_factory=lambda: settings.default_periods_per_year)

    @field_validator("principal", "installment", "total_interest", "interest_rate_percent", mode="before")
    @classmethod
    def parse_float(cls, v):
        return _to_float(v)

    @field_validator("periods", mode="before")
    @classmethod
    def parse_int(cls, v):
        return _to_int(v)


# ---- Response ----

class LoanResultResponse(BaseModel):
    total_paid: float
    total_interest: float
    periodic_rate: float
    nominal_apr: float
    effective_apr: float

    @classmethod
    def from_result(cls, result: LoanResult) -> "LoanResultResponse":
        return cls(
            total_paid=result.total_paid,
            total_interest=result.total_interest,
            periodic_rate=result.periodic_rate,
            nominal_apr=result.nominal_apr,
            effective_apr=result.effective_apr,
        )


class AprResponse(BaseModel):
    """Either a result or an error message, never both."""
    result: LoanResultResponse | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_exactly_one(self):
        if (self.result is None) == (self.error is None):
            raise ValueError("AprResponse needs exactly one of result or error")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None
