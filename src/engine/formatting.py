"""Display strings for a solved loan."""

from src.config import settings
from src.models.loan import LoanResult


def format_percent(value: float) -> str:
    """0.123456 -> '12.35%'. Trailing zeros dropped, at most 2 decimals."""
    text = f"{value * 100:,.2f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text}%"


def format_currency(value: float, symbol: str | None = None) -> str:
    symbol = settings.currency_symbol if symbol is None else symbol
    amount = f"{abs(value):,.2f}"
    if amount != "0.00" and value < 0:
        return f"-{symbol}{amount}"
    return f"{symbol}{amount}"


def format_result(result: LoanResult) -> dict[str, str]:
    return {
        "Total paid": format_currency(result.total_paid),
        "Total interest": format_currency(result.total_interest),
        "Periodic rate": format_percent(result.periodic_rate),
        "Nominal APR": format_percent(result.nominal_apr),
        "Effective APR": format_percent(result.effective_apr),
    }
