"""UIF (Unemployment Insurance Fund) contribution calculator."""

from decimal import Decimal
from typing import NamedTuple

from src.calculators.rounding import round2, to_decimal
from src.calculators.tax_data import DEFAULT_TAX_TABLE, TaxTable


class UifContribution(NamedTuple):
    """Monthly UIF contribution for each side of the employment."""

    employee: Decimal
    employer: Decimal


def calculate_uif(
    monthly_gross: Decimal | int | float | str,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> UifContribution:
    """Calculate monthly UIF.

    Earnings are capped at the table's monthly ceiling. Employee and employer
    pay the same rate on the same capped amount, so one figure is mirrored
    onto both legs.
    """
    capped = min(to_decimal(monthly_gross), table.uif_monthly_cap)
    contribution = round2(capped * table.uif_rate)
    return UifContribution(employee=contribution, employer=contribution)
