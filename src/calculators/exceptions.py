"""Typed errors for the payroll calculators.

Each error carries a stable ``code`` so callers can map it to a response
without matching on message text.
"""

from decimal import Decimal


class PayrollError(Exception):
    """Base class for payroll calculator errors."""

    code: str = "PAYROLL_ERROR"


class TaxTableError(PayrollError):
    """A tax table violates its structural invariants."""

    code = "INVALID_TAX_TABLE"


class UnknownTaxYearError(PayrollError):
    """No tax table is registered for the requested tax year."""

    code = "UNKNOWN_TAX_YEAR"

    def __init__(self, tax_year: str, available: list[str]):
        self.tax_year = tax_year
        self.available = available
        super().__init__(
            f"Unknown tax year: {tax_year}. Available: {', '.join(available)}"
        )


class BracketNotFoundError(PayrollError):
    """No bracket covers the income. Indicates a broken table, not bad input."""

    code = "BRACKET_NOT_FOUND"

    def __init__(self, income: Decimal, tax_year: str):
        self.income = income
        self.tax_year = tax_year
        super().__init__(f"No {tax_year} tax bracket covers income {income}")
