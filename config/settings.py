"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings

from src.calculators.tax_data import DEFAULT_AGE, DEFAULT_TAX_YEAR


class Settings(BaseSettings):
    """Payroll configuration from ``PAYROLL_*`` environment variables."""

    tax_year: str = DEFAULT_TAX_YEAR
    default_age: int = DEFAULT_AGE
    log_level: str = "INFO"

    model_config = {"env_prefix": "PAYROLL_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
