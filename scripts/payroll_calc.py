"""Command-line payroll calculator.

Runs the payroll or payslip calculation for one employee and prints the
breakdown.

Usage:
    python scripts/payroll_calc.py payroll 480000 --pension 3000 --age 67
    python scripts/payroll_calc.py payslip 25000 --overtime 1500 --medical-aid 1800
    PAYROLL_TAX_YEAR=2025-26 python scripts/payroll_calc.py payroll 300000
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.calculators.exceptions import UnknownTaxYearError
from src.calculators.models import PayrollCalculationInput, PayslipInput
from src.calculators.payroll import calculate_payroll
from src.calculators.payslip import calculate_payslip_amounts
from src.calculators.tax_data import get_tax_table
from src.calculators.tax_year import age_at_end_of_tax_year

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SA Payroll Calculator")
    parser.add_argument(
        "--tax-year", default=settings.tax_year,
        help=f"Tax year key, e.g. 2024-25 (default: {settings.tax_year})",
    )
    parser.add_argument(
        "--age", type=int, default=settings.default_age,
        help=f"Age at end of tax year (default: {settings.default_age})",
    )
    parser.add_argument(
        "--birth-date", type=date.fromisoformat,
        help="Date of birth (YYYY-MM-DD); overrides --age for the chosen tax year",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    payroll = sub.add_parser("payroll", help="Monthly payroll from an annual salary")
    payroll.add_argument("annual_salary", help="Annual gross salary in ZAR")
    payroll.add_argument("--pension", default="0", help="Monthly employee pension")
    payroll.add_argument("--pension-employer", default="0", help="Monthly employer pension")
    payroll.add_argument("--medical-aid", default="0", help="Monthly medical aid")
    payroll.add_argument("--other", default="0", help="Other monthly deductions")

    payslip = sub.add_parser("payslip", help="Payslip from monthly pay components")
    payslip.add_argument("basic_salary", help="Monthly basic salary in ZAR")
    payslip.add_argument("--overtime", default="0")
    payslip.add_argument("--bonus", default="0")
    payslip.add_argument("--commission", default="0")
    payslip.add_argument("--allowances", default="0")
    payslip.add_argument("--pension", default="0", help="Monthly employee pension")
    payslip.add_argument("--pension-employer", default="0", help="Monthly employer pension")
    payslip.add_argument("--medical-aid", default="0", help="Monthly medical aid")
    payslip.add_argument("--other", default="0", help="Other monthly deductions")

    return parser


def print_breakdown(title: str, amounts: dict[str, object]) -> None:
    """Log a titled two-column breakdown."""
    logger.info("=" * 50)
    logger.info(title)
    logger.info("-" * 50)
    for name, value in amounts.items():
        logger.info("  %-30s %15s", name, value)
    logger.info("=" * 50)


def main(argv: list[str] | None = None) -> int:
    """Run a payroll or payslip calculation from command-line arguments."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        table = get_tax_table(args.tax_year)
    except UnknownTaxYearError as e:
        logger.error("%s", e)
        return 1

    if args.birth_date is not None:
        args.age = age_at_end_of_tax_year(args.birth_date, table.tax_year)

    if args.command == "payroll":
        result = calculate_payroll(
            PayrollCalculationInput(
                annual_gross_salary=args.annual_salary,
                age_at_end_of_tax_year=args.age,
                pension_contribution_employee=args.pension,
                medical_aid_contribution=args.medical_aid,
                other_deductions=args.other,
                pension_contribution_employer=args.pension_employer,
            ),
            table,
        )
        print_breakdown(f"PAYROLL ({table.tax_year}, age {args.age})", result.model_dump())
    else:
        result = calculate_payslip_amounts(
            PayslipInput(
                basic_salary=args.basic_salary,
                overtime=args.overtime,
                bonus=args.bonus,
                commission=args.commission,
                allowances=args.allowances,
                pension_employee=args.pension,
                medical_aid=args.medical_aid,
                other_deductions=args.other,
                pension_employer=args.pension_employer,
                age_at_end_of_tax_year=args.age,
            ),
            table,
        )
        print_breakdown(f"PAYSLIP ({table.tax_year}, age {args.age})", result.model_dump())

    return 0


if __name__ == "__main__":
    sys.exit(main())
