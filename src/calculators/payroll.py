"""Payroll calculator: monthly payroll from an annual salary."""

import logging
from decimal import Decimal

from src.calculators.models import PayrollCalculationInput, PayrollCalculationResult
from src.calculators.paye import calculate_paye
from src.calculators.rounding import round2
from src.calculators.sdl import calculate_sdl
from src.calculators.tax_data import DEFAULT_TAX_TABLE, TaxTable
from src.calculators.uif import calculate_uif

logger = logging.getLogger(__name__)


def retirement_deduction(
    annual_gross_salary: Decimal,
    monthly_pension_contribution: Decimal,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> Decimal:
    """Deductible pension contribution for the year.

    Limited to the lowest of the contribution itself, a percentage of
    income, and an absolute annual ceiling.
    """
    return min(
        monthly_pension_contribution * 12,
        annual_gross_salary * table.retirement_deduction_rate,
        table.retirement_deduction_cap,
    )


def calculate_payroll(
    payroll_input: PayrollCalculationInput,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> PayrollCalculationResult:
    """Calculate a full monthly payroll for one employee.

    PAYE is computed once on the annual taxable income and divided by 12
    rather than re-derived from monthly figures. UIF and SDL are computed on
    the rounded monthly gross. Employee pension is deducted from pay in full;
    only the capped portion reduces taxable income.

    Deduction inputs are rounded to the cent before they are summed, so net
    pay always equals gross less the reported total.

    Args:
        payroll_input: Annual salary and monthly deduction amounts.
        table: Tax table for the tax year being calculated.

    Returns:
        PayrollCalculationResult with every money figure rounded to the cent.
    """
    annual_gross = payroll_input.annual_gross_salary
    pension_employee = round2(payroll_input.pension_contribution_employee)
    medical_aid = round2(payroll_input.medical_aid_contribution)
    other = round2(payroll_input.other_deductions)
    pension_employer = round2(payroll_input.pension_contribution_employer)

    monthly_gross = round2(annual_gross / 12)

    annual_taxable_income = annual_gross - retirement_deduction(
        annual_gross, payroll_input.pension_contribution_employee, table
    )
    annual_paye = calculate_paye(
        annual_taxable_income, payroll_input.age_at_end_of_tax_year, table
    )
    monthly_paye = round2(annual_paye / 12)

    uif = calculate_uif(monthly_gross, table)
    sdl = calculate_sdl(monthly_gross, table)

    total_deductions = round2(
        monthly_paye + uif.employee + pension_employee + medical_aid + other
    )
    monthly_net_pay = round2(monthly_gross - total_deductions)
    employer_cost = monthly_gross + uif.employer + sdl + pension_employer

    logger.debug(
        "Payroll %s: gross=%s taxable=%s paye=%s net=%s",
        table.tax_year, monthly_gross, annual_taxable_income, monthly_paye, monthly_net_pay,
    )

    return PayrollCalculationResult(
        tax_year=table.tax_year,
        monthly_gross=monthly_gross,
        monthly_paye=monthly_paye,
        monthly_uif_employee=uif.employee,
        monthly_pension_employee=pension_employee,
        monthly_medical_aid=medical_aid,
        monthly_other_deductions=other,
        monthly_total_deductions=total_deductions,
        monthly_net_pay=monthly_net_pay,
        monthly_uif_employer=uif.employer,
        monthly_sdl=sdl,
        monthly_pension_employer=pension_employer,
        monthly_total_employer_cost=round2(employer_cost),
        annual_gross=round2(annual_gross),
        annual_taxable_income=round2(annual_taxable_income),
        annual_paye=annual_paye,
        annual_uif_employee=round2(uif.employee * 12),
        annual_net_pay=round2(monthly_net_pay * 12),
    )
