"""Shared test fixtures."""

from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
import yaml

from src.calculators.tax_data import Rebates, TaxBracket, TaxTable, Thresholds

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def synthetic_table() -> TaxTable:
    """Two-bracket table with round numbers for hand-checkable results."""
    return TaxTable(
        tax_year="test",
        brackets=(
            TaxBracket(Decimal("0"), Decimal("9999"), Decimal("0.10"), Decimal("0")),
            # 0 + 10,000 * 10% = 1,000
            TaxBracket(Decimal("10000"), None, Decimal("0.20"), Decimal("1000")),
        ),
        rebates=Rebates(Decimal("100"), Decimal("50"), Decimal("25")),
        thresholds=Thresholds(Decimal("1000"), Decimal("1500"), Decimal("1750")),
        uif_rate=Decimal("0.02"),
        uif_monthly_cap=Decimal("5000"),
        sdl_rate=Decimal("0.005"),
        retirement_deduction_rate=Decimal("0.10"),
        retirement_deduction_cap=Decimal("1200"),
    )


@pytest.fixture(scope="session")
def payroll_scenarios() -> list[dict[str, Any]]:
    """Hand-verified payroll scenarios against the 2024-25 SARS table."""
    path = FIXTURES_DIR / "payroll_scenarios.yaml"
    data = yaml.safe_load(path.read_text())
    return data["scenarios"]


@pytest.fixture(scope="session")
def payslip_scenarios() -> list[dict[str, Any]]:
    """Hand-verified payslip scenarios against the 2024-25 SARS table."""
    path = FIXTURES_DIR / "payroll_scenarios.yaml"
    data = yaml.safe_load(path.read_text())
    return data["payslips"]
