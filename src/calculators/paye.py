"""PAYE calculator: annual income tax after age-banded rebates."""

import logging
from decimal import Decimal

from src.calculators.rounding import ZERO, round2, to_decimal
from src.calculators.tax_data import DEFAULT_AGE, DEFAULT_TAX_TABLE, TaxTable

logger = logging.getLogger(__name__)


def calculate_paye(
    annual_taxable_income: Decimal | int | float | str,
    age_at_end_of_tax_year: int = DEFAULT_AGE,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> Decimal:
    """Calculate annual PAYE using the SARS bracket convention.

    Gross tax is ``base_tax + (income - min_income + 1) * rate``, matching
    the published tables where ``base_tax`` is the tax at ``min_income - 1``.
    Rebates for the employee's age band are then subtracted and the result
    floored at zero. Rounding to the cent is the only rounding step.

    Args:
        annual_taxable_income: Annual income after deductions. Values <= 0
            yield zero tax.
        age_at_end_of_tax_year: Selects the threshold and rebate band.
        table: Tax table for the tax year being calculated.

    Returns:
        Annual PAYE in rand, rounded half-up to the cent.
    """
    income = to_decimal(annual_taxable_income)
    if income <= 0:
        return round2(ZERO)

    band = table.age_band(age_at_end_of_tax_year)
    if income <= band.threshold:
        logger.debug(
            "Income %s at or below %s threshold %s (age %d)",
            income, table.tax_year, band.threshold, age_at_end_of_tax_year,
        )
        return round2(ZERO)

    bracket = table.bracket_for(income)
    gross_tax = bracket.base_tax + (income - bracket.min_income + 1) * bracket.rate
    tax = max(ZERO, gross_tax - band.rebate)

    logger.debug(
        "PAYE %s: income=%s bracket_min=%s rate=%s gross=%s rebate=%s",
        table.tax_year, income, bracket.min_income, bracket.rate, gross_tax, band.rebate,
    )
    return round2(tax)
