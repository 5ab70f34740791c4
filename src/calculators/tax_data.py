"""SA payroll tax constants: PAYE brackets, rebates, thresholds, UIF and SDL.

Hardcoded Python constants (not DB-driven), one table per SARS tax year.
Tables are validated when constructed, so a malformed schedule fails at
import time rather than producing a wrong payslip.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple

from src.calculators.exceptions import (
    BracketNotFoundError,
    TaxTableError,
    UnknownTaxYearError,
)

DEFAULT_AGE = 30

# SARS publishes whole-rand base amounts, so allow for the dropped cents.
_BASE_TAX_TOLERANCE = Decimal("1")


class TaxBracket(NamedTuple):
    """A single PAYE bracket. ``base_tax`` is the tax owed at ``min_income - 1``."""

    min_income: Decimal  # inclusive
    max_income: Decimal | None  # inclusive, None = no cap
    rate: Decimal
    base_tax: Decimal


class Rebates(NamedTuple):
    """Annual rebates, cumulative by age."""

    primary: Decimal
    secondary: Decimal  # 65 and older
    tertiary: Decimal  # 75 and older


class Thresholds(NamedTuple):
    """Annual taxable income at or below which no PAYE is due."""

    under_65: Decimal
    age_65_to_74: Decimal
    age_75_plus: Decimal


class AgeBand(NamedTuple):
    """Threshold and total rebate that apply from ``min_age`` upwards."""

    min_age: int
    threshold: Decimal
    rebate: Decimal


@dataclass(frozen=True)
class TaxTable:
    """All payroll tax parameters for a single SA tax year."""

    tax_year: str
    brackets: tuple[TaxBracket, ...]
    rebates: Rebates
    thresholds: Thresholds
    uif_rate: Decimal
    uif_monthly_cap: Decimal
    sdl_rate: Decimal
    retirement_deduction_rate: Decimal = Decimal("0.275")
    retirement_deduction_cap: Decimal = Decimal("350000")

    def __post_init__(self) -> None:
        if not self.brackets:
            raise TaxTableError(f"{self.tax_year}: no tax brackets")

        first = self.brackets[0]
        if first.min_income != 0:
            raise TaxTableError(
                f"{self.tax_year}: first bracket starts at {first.min_income}, not 0"
            )
        if first.base_tax != 0:
            raise TaxTableError(f"{self.tax_year}: first bracket has non-zero base tax")

        for prev, bracket in zip(self.brackets, self.brackets[1:]):
            if prev.max_income is None:
                raise TaxTableError(
                    f"{self.tax_year}: unbounded bracket at {prev.min_income} is not last"
                )
            if bracket.min_income != prev.max_income + 1:
                raise TaxTableError(
                    f"{self.tax_year}: brackets not contiguous between "
                    f"{prev.max_income} and {bracket.min_income}"
                )
            expected = prev.base_tax + (prev.max_income - prev.min_income + 1) * prev.rate
            if abs(expected - bracket.base_tax) >= _BASE_TAX_TOLERANCE:
                raise TaxTableError(
                    f"{self.tax_year}: base tax {bracket.base_tax} at "
                    f"{bracket.min_income} does not match lower brackets ({expected})"
                )

        if self.brackets[-1].max_income is not None:
            raise TaxTableError(f"{self.tax_year}: top bracket must be unbounded")

    def age_bands(self) -> tuple[AgeBand, ...]:
        """Age bands ordered highest first, so the first match wins."""
        r = self.rebates
        t = self.thresholds
        return (
            AgeBand(75, t.age_75_plus, r.primary + r.secondary + r.tertiary),
            AgeBand(65, t.age_65_to_74, r.primary + r.secondary),
            AgeBand(0, t.under_65, r.primary),
        )

    def age_band(self, age: int) -> AgeBand:
        bands = self.age_bands()
        for band in bands:
            if age >= band.min_age:
                return band
        # Negative ages fall through to the youngest band.
        return bands[-1]

    def bracket_for(self, income: Decimal) -> TaxBracket:
        """Return the bracket covering ``income``.

        Brackets are published in whole rand; income between one bracket's
        ``max_income`` and the next ``min_income`` (i.e. cents) stays in the
        lower bracket. SARS rounds each base_tax down to whole rand, so such
        an income can owe a few cents more than the next whole rand: tax is
        non-decreasing over whole-rand incomes only.
        """
        for bracket in reversed(self.brackets):
            if income >= bracket.min_income:
                return bracket
        raise BracketNotFoundError(income, self.tax_year)


# 2023-24 schedule; SARS made no inflation adjustment in the 2024 or 2025 budgets.
_BRACKETS_2023 = (
    TaxBracket(Decimal("0"), Decimal("237100"), Decimal("0.18"), Decimal("0")),
    TaxBracket(Decimal("237101"), Decimal("370500"), Decimal("0.26"), Decimal("42678")),
    TaxBracket(Decimal("370501"), Decimal("512800"), Decimal("0.31"), Decimal("77362")),
    TaxBracket(Decimal("512801"), Decimal("673000"), Decimal("0.36"), Decimal("121475")),
    TaxBracket(Decimal("673001"), Decimal("857900"), Decimal("0.39"), Decimal("179147")),
    TaxBracket(Decimal("857901"), Decimal("1817000"), Decimal("0.41"), Decimal("251258")),
    TaxBracket(Decimal("1817001"), None, Decimal("0.45"), Decimal("644489")),
)

_REBATES_2023 = Rebates(
    primary=Decimal("17235"),
    secondary=Decimal("9444"),
    tertiary=Decimal("3145"),
)

_THRESHOLDS_2023 = Thresholds(
    under_65=Decimal("95750"),
    age_65_to_74=Decimal("148217"),
    age_75_plus=Decimal("165689"),
)


def _sars_table(tax_year: str) -> TaxTable:
    return TaxTable(
        tax_year=tax_year,
        brackets=_BRACKETS_2023,
        rebates=_REBATES_2023,
        thresholds=_THRESHOLDS_2023,
        uif_rate=Decimal("0.01"),  # 1% employee + 1% employer
        uif_monthly_cap=Decimal("17712"),
        sdl_rate=Decimal("0.01"),  # employer only
    )


TAX_YEARS: dict[str, TaxTable] = {
    year: _sars_table(year) for year in ("2023-24", "2024-25", "2025-26")
}

DEFAULT_TAX_YEAR = "2024-25"
DEFAULT_TAX_TABLE = TAX_YEARS[DEFAULT_TAX_YEAR]


def get_tax_table(tax_year: str = DEFAULT_TAX_YEAR) -> TaxTable:
    """Look up a registered table; unknown years are a configuration error."""
    try:
        return TAX_YEARS[tax_year]
    except KeyError:
        raise UnknownTaxYearError(tax_year, sorted(TAX_YEARS)) from None
