# This project was developed with assistance from AI tools.
"""Mortgage calculator schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LoanInputs(BaseModel):
    """Loan parameters entered by the user.

    Ranges are checked by ``validate_inputs``, which reports every
    violation together as human-readable messages. NaN and infinity are
    rejected at parse time.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    loan_amount: float
    interest_rate: float = Field(description="Annual percentage rate.")
    loan_term_years: int
    property_tax_annual: float
    home_insurance_annual: float
    pmi_rate: float | None = Field(default=None, description="Annual PMI rate in percent.")
    hoa_fees: float | None = Field(default=None, description="Monthly HOA dues.")
    down_payment: float
    closing_costs: float | None = None


class CalculationResult(BaseModel):
    """Monthly breakdown and lifetime totals for one set of inputs."""

    model_config = ConfigDict(frozen=True)

    # Basic loan info
    loan_amount: float
    down_payment: float
    purchase_price: float

    # Monthly payments
    principal_and_interest: float
    property_tax_monthly: float
    home_insurance_monthly: float
    pmi_monthly: float
    hoa_fees_monthly: float
    total_monthly_payment: float

    # Totals
    total_interest: float
    total_payments: float
    total_pmi: float

    # Loan details
    interest_rate: float
    loan_term_years: int
    monthly_rate: float


class AmortizationEntry(BaseModel):
    """One payment period of the amortization schedule."""

    model_config = ConfigDict(frozen=True)

    payment_number: int
    payment_date: str
    beginning_balance: float
    monthly_payment: float
    principal_payment: float
    interest_payment: float
    ending_balance: float
    cumulative_interest: float
    cumulative_principal: float


class ValidationResponse(BaseModel):
    """Outcome of input validation."""

    valid: bool
    errors: list[str] = []


class AmortizationRequest(BaseModel):
    """Inputs plus the date the loan starts; payments fall one month apart."""

    inputs: LoanInputs
    start_date: date | None = None


class AmortizationResponse(BaseModel):
    """Calculation result together with its full schedule."""

    calculation: CalculationResult
    amortization: list[AmortizationEntry]


class PointInTimeRequest(BaseModel):
    """Look up schedule totals on a specific payment date."""

    inputs: LoanInputs
    target_date: date
    start_date: date | None = None


class PointInTimeResponse(BaseModel):
    """Value of a schedule column on the requested payment date."""

    target_date: date
    value: float
    matched: bool = Field(
        description="False when no payment falls on target_date and the default was returned.",
    )
