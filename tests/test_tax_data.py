"""Tests for tax table validation and the tax year registry."""

from dataclasses import FrozenInstanceError, replace
from decimal import Decimal

import pytest

from src.calculators.exceptions import (
    BracketNotFoundError,
    PayrollError,
    TaxTableError,
    UnknownTaxYearError,
)
from src.calculators.tax_data import (
    DEFAULT_TAX_TABLE,
    DEFAULT_TAX_YEAR,
    TAX_YEARS,
    TaxBracket,
    get_tax_table,
)


class TestRegistry:
    def test_default_year(self) -> None:
        assert DEFAULT_TAX_YEAR == "2024-25"
        assert get_tax_table() is DEFAULT_TAX_TABLE
        assert DEFAULT_TAX_TABLE.tax_year == "2024-25"

    def test_registered_years(self) -> None:
        assert sorted(TAX_YEARS) == ["2023-24", "2024-25", "2025-26"]
        for year, table in TAX_YEARS.items():
            assert table.tax_year == year

    def test_unknown_year(self) -> None:
        with pytest.raises(UnknownTaxYearError) as exc_info:
            get_tax_table("2099-00")
        assert exc_info.value.tax_year == "2099-00"
        assert exc_info.value.code == "UNKNOWN_TAX_YEAR"
        assert "2024-25" in exc_info.value.available
        assert isinstance(exc_info.value, PayrollError)

    def test_2024_25_values(self) -> None:
        table = get_tax_table("2024-25")
        assert len(table.brackets) == 7
        assert table.brackets[1] == TaxBracket(
            Decimal("237101"), Decimal("370500"), Decimal("0.26"), Decimal("42678")
        )
        assert table.brackets[-1].max_income is None
        assert table.rebates.primary == Decimal("17235")
        assert table.thresholds.age_75_plus == Decimal("165689")
        assert table.uif_monthly_cap == Decimal("17712")
        assert table.retirement_deduction_rate == Decimal("0.275")
        assert table.retirement_deduction_cap == Decimal("350000")

    def test_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_TAX_TABLE.uif_rate = Decimal("0.02")  # type: ignore[misc]


class TestAgeBands:
    def test_ordered_highest_first(self) -> None:
        bands = DEFAULT_TAX_TABLE.age_bands()
        assert [b.min_age for b in bands] == [75, 65, 0]

    def test_cumulative_rebates(self) -> None:
        bands = {b.min_age: b for b in DEFAULT_TAX_TABLE.age_bands()}
        assert bands[0].rebate == Decimal("17235")
        assert bands[65].rebate == Decimal("26679")
        assert bands[75].rebate == Decimal("29824")

    @pytest.mark.parametrize(
        "age,threshold",
        [(0, "95750"), (64, "95750"), (65, "148217"), (74, "148217"), (75, "165689")],
    )
    def test_band_selection(self, age: int, threshold: str) -> None:
        assert DEFAULT_TAX_TABLE.age_band(age).threshold == Decimal(threshold)

    def test_negative_age_uses_youngest_band(self) -> None:
        assert DEFAULT_TAX_TABLE.age_band(-5).min_age == 0


class TestBracketLookup:
    @pytest.mark.parametrize(
        "income,expected_min",
        [
            ("0", "0"),
            ("237100", "0"),
            ("237100.99", "0"),
            ("237101", "237101"),
            ("1817000", "857901"),
            ("50000000", "1817001"),
        ],
    )
    def test_bracket_for(self, income: str, expected_min: str) -> None:
        bracket = DEFAULT_TAX_TABLE.bracket_for(Decimal(income))
        assert bracket.min_income == Decimal(expected_min)

    def test_below_first_bracket_raises(self) -> None:
        with pytest.raises(BracketNotFoundError) as exc_info:
            DEFAULT_TAX_TABLE.bracket_for(Decimal("-1"))
        assert exc_info.value.code == "BRACKET_NOT_FOUND"
        assert exc_info.value.income == Decimal("-1")


class TestValidation:
    def test_synthetic_table_is_valid(self, synthetic_table) -> None:
        assert synthetic_table.bracket_for(Decimal("10000")).rate == Decimal("0.20")

    def test_no_brackets(self, synthetic_table) -> None:
        with pytest.raises(TaxTableError):
            replace(synthetic_table, brackets=())

    def test_first_bracket_not_at_zero(self, synthetic_table) -> None:
        brackets = (
            TaxBracket(Decimal("1"), Decimal("9999"), Decimal("0.10"), Decimal("0")),
            synthetic_table.brackets[1],
        )
        with pytest.raises(TaxTableError, match="not 0"):
            replace(synthetic_table, brackets=brackets)

    def test_gap(self, synthetic_table) -> None:
        brackets = (
            synthetic_table.brackets[0],
            TaxBracket(Decimal("10500"), None, Decimal("0.20"), Decimal("1000")),
        )
        with pytest.raises(TaxTableError, match="contiguous"):
            replace(synthetic_table, brackets=brackets)

    def test_overlap(self, synthetic_table) -> None:
        brackets = (
            synthetic_table.brackets[0],
            TaxBracket(Decimal("9000"), None, Decimal("0.20"), Decimal("1000")),
        )
        with pytest.raises(TaxTableError, match="contiguous"):
            replace(synthetic_table, brackets=brackets)

    def test_unbounded_bracket_not_last(self, synthetic_table) -> None:
        brackets = (
            TaxBracket(Decimal("0"), None, Decimal("0.10"), Decimal("0")),
            synthetic_table.brackets[1],
        )
        with pytest.raises(TaxTableError, match="not last"):
            replace(synthetic_table, brackets=brackets)

    def test_bounded_top_bracket(self, synthetic_table) -> None:
        brackets = (
            synthetic_table.brackets[0],
            TaxBracket(Decimal("10000"), Decimal("99999"), Decimal("0.20"), Decimal("1000")),
        )
        with pytest.raises(TaxTableError, match="unbounded"):
            replace(synthetic_table, brackets=brackets)

    def test_inconsistent_base_tax(self, synthetic_table) -> None:
        brackets = (
            synthetic_table.brackets[0],
            TaxBracket(Decimal("10000"), None, Decimal("0.20"), Decimal("1500")),
        )
        with pytest.raises(TaxTableError, match="base tax"):
            replace(synthetic_table, brackets=brackets)

    def test_base_tax_allows_dropped_cents(self) -> None:
        """SARS publishes 42,678 where the lower bracket integrates to 42,678.18."""
        first = DEFAULT_TAX_TABLE.brackets[0]
        assert first.base_tax + (first.max_income + 1) * first.rate == Decimal("42678.18")
        assert DEFAULT_TAX_TABLE.brackets[1].base_tax == Decimal("42678")

    def test_error_code(self, synthetic_table) -> None:
        with pytest.raises(TaxTableError) as exc_info:
            replace(synthetic_table, brackets=())
        assert exc_info.value.code == "INVALID_TAX_TABLE"
