"""Payslip calculator: one pay period from itemised monthly components."""

from src.calculators.models import PayslipInput, PayslipResult
from src.calculators.paye import calculate_paye
from src.calculators.rounding import round2
from src.calculators.sdl import calculate_sdl
from src.calculators.tax_data import DEFAULT_TAX_TABLE, TaxTable
from src.calculators.uif import calculate_uif


def calculate_payslip_amounts(
    payslip_input: PayslipInput,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> PayslipResult:
    """Calculate payslip amounts for a monthly pay period.

    Components are already monthly; only the PAYE call annualises them.

    Unlike calculate_payroll, the full employee pension is subtracted from
    taxable income without the percentage or ceiling cap. Stored payslips
    were produced this way, so the two entry points differ for large pension
    contributions.
    """
    gross = (
        payslip_input.basic_salary
        + payslip_input.overtime
        + payslip_input.bonus
        + payslip_input.commission
        + payslip_input.allowances
    )

    annual_taxable_income = gross * 12 - payslip_input.pension_employee * 12
    annual_paye = calculate_paye(
        annual_taxable_income, payslip_input.age_at_end_of_tax_year, table
    )
    paye = round2(annual_paye / 12)

    uif = calculate_uif(gross, table)
    sdl = calculate_sdl(gross, table)

    total_deductions = round2(
        paye
        + uif.employee
        + payslip_input.pension_employee
        + payslip_input.medical_aid
        + payslip_input.other_deductions
    )
    gross_pay = round2(gross)
    net_pay = round2(gross_pay - total_deductions)

    return PayslipResult(
        gross_pay=gross_pay,
        paye=paye,
        uif=uif.employee,
        total_deductions=total_deductions,
        net_pay=net_pay,
        uif_employer=uif.employer,
        sdl=sdl,
        pension_employer=round2(payslip_input.pension_employer),
        total_employer_cost=round2(
            gross + uif.employer + sdl + payslip_input.pension_employer
        ),
    )
