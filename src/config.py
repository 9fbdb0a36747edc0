"""Application settings.

The engine never configures logging itself. Callers embedding the
calculator call `configure_logging()` once at startup to apply
`settings.log_level`.
"""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "APR_"}

    # Annualization basis when the caller does not pass one (12 = monthly installments)
    default_periods_per_year: int = 12

    # Display
    currency_symbol: str = "$"

    # App
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
