"""Pydantic models for payroll calculator inputs and results.

Money fields are Decimal rand amounts. The models coerce ints, floats and
strings but enforce no ranges: validating business input belongs to the
caller. NaN and infinity are rejected with a ValidationError, since the
Decimal arithmetic in the calculators cannot round them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from src.calculators.tax_data import DEFAULT_AGE

_FROZEN = ConfigDict(frozen=True, allow_inf_nan=False)


# --- Annual-salary entry point ---


class PayrollCalculationInput(BaseModel):
    """Annual salary plus monthly deductions for one employee."""

    model_config = _FROZEN

    annual_gross_salary: Decimal
    age_at_end_of_tax_year: int = DEFAULT_AGE
    pension_contribution_employee: Decimal = Decimal("0")
    medical_aid_contribution: Decimal = Decimal("0")
    other_deductions: Decimal = Decimal("0")
    pension_contribution_employer: Decimal = Decimal("0")


class PayrollCalculationResult(BaseModel):
    """Monthly and annual payroll figures, rounded to the cent."""

    model_config = _FROZEN

    tax_year: str

    monthly_gross: Decimal
    monthly_paye: Decimal
    monthly_uif_employee: Decimal
    monthly_pension_employee: Decimal
    monthly_medical_aid: Decimal
    monthly_other_deductions: Decimal
    monthly_total_deductions: Decimal
    monthly_net_pay: Decimal

    # Employer contributions
    monthly_uif_employer: Decimal
    monthly_sdl: Decimal
    monthly_pension_employer: Decimal
    monthly_total_employer_cost: Decimal

    annual_gross: Decimal
    annual_taxable_income: Decimal
    annual_paye: Decimal
    annual_uif_employee: Decimal
    annual_net_pay: Decimal


# --- Itemised payslip entry point ---


class PayslipInput(BaseModel):
    """Monthly pay components and deductions for a single pay period."""

    model_config = _FROZEN

    basic_salary: Decimal
    overtime: Decimal = Decimal("0")
    bonus: Decimal = Decimal("0")
    commission: Decimal = Decimal("0")
    allowances: Decimal = Decimal("0")
    pension_employee: Decimal = Decimal("0")
    medical_aid: Decimal = Decimal("0")
    other_deductions: Decimal = Decimal("0")
    pension_employer: Decimal = Decimal("0")
    age_at_end_of_tax_year: int = DEFAULT_AGE


class PayslipResult(BaseModel):
    """Computed payslip amounts for one pay period."""

    model_config = _FROZEN

    gross_pay: Decimal
    paye: Decimal
    uif: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    uif_employer: Decimal
    sdl: Decimal
    pension_employer: Decimal
    total_employer_cost: Decimal
