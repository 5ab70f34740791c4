"""SDL (Skills Development Levy) calculator."""

from decimal import Decimal

from src.calculators.rounding import round2, to_decimal
from src.calculators.tax_data import DEFAULT_TAX_TABLE, TaxTable


def calculate_sdl(
    monthly_gross: Decimal | int | float | str,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> Decimal:
    """Calculate the monthly SDL. Employer only, uncapped."""
    return round2(to_decimal(monthly_gross) * table.sdl_rate)
