# This project was developed with assistance from AI tools.
"""Mortgage calculation engine.

Pure math, no I/O. Shared by the calculator routes, the scenario store and
the spreadsheet export. Out-of-range inputs are not rejected here; callers
run ``validate_inputs`` first.
"""

from collections.abc import Callable
from datetime import date
from typing import Literal

from ..schemas.calculator import AmortizationEntry, CalculationResult, LoanInputs
from .dates import add_months, to_date_string

PMI_EQUITY_THRESHOLD_PCT = 20
PAYOFF_TOLERANCE = 0.01


def _monthly_rate(annual_rate: float) -> float:
    return annual_rate / 100 / 12


def calculate_monthly_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Principal-and-interest payment for a fixed-rate loan.

    P = L * [r(1+r)^n] / [(1+r)^n - 1], with r the monthly rate and n the
    number of monthly payments.
    """
    if principal <= 0:
        return 0.0

    monthly_rate = _monthly_rate(annual_rate)
    n_payments = term_years * 12

    if monthly_rate == 0:
        return principal / n_payments

    compound = (1 + monthly_rate) ** n_payments
    return principal * (monthly_rate * compound) / (compound - 1)


def calculate_total_interest(principal: float, monthly_payment: float, term_years: int) -> float:
    """Interest over the nominal term (payment x count, less principal)."""
    total_payments = monthly_payment * term_years * 12
    return total_payments - principal


def calculate_pmi(loan_amount: float, pmi_rate: float, down_payment_percent: float) -> float:
    """Monthly PMI; waived once the down payment reaches 20% of the price."""
    if down_payment_percent >= PMI_EQUITY_THRESHOLD_PCT:
        return 0.0
    return loan_amount * pmi_rate / 100 / 12


def calculate_mortgage(inputs: LoanInputs) -> CalculationResult:
    """Build the full monthly breakdown and lifetime totals."""
    purchase_price = inputs.loan_amount + inputs.down_payment
    down_payment_percent = (
        inputs.down_payment * 100 / purchase_price if purchase_price > 0 else 0.0
    )
    n_payments = inputs.loan_term_years * 12

    principal_and_interest = calculate_monthly_payment(
        inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years
    )

    property_tax_monthly = inputs.property_tax_annual / 12
    home_insurance_monthly = inputs.home_insurance_annual / 12
    pmi_monthly = (
        calculate_pmi(inputs.loan_amount, inputs.pmi_rate, down_payment_percent)
        if inputs.pmi_rate
        else 0.0
    )
    hoa_fees_monthly = inputs.hoa_fees or 0.0

    total_monthly_payment = (
        principal_and_interest
        + property_tax_monthly
        + home_insurance_monthly
        + pmi_monthly
        + hoa_fees_monthly
    )

    return CalculationResult(
        loan_amount=inputs.loan_amount,
        down_payment=inputs.down_payment,
        purchase_price=purchase_price,
        principal_and_interest=principal_and_interest,
        property_tax_monthly=property_tax_monthly,
        home_insurance_monthly=home_insurance_monthly,
        pmi_monthly=pmi_monthly,
        hoa_fees_monthly=hoa_fees_monthly,
        total_monthly_payment=total_monthly_payment,
        total_interest=calculate_total_interest(
            inputs.loan_amount, principal_and_interest, inputs.loan_term_years
        ),
        total_payments=total_monthly_payment * n_payments,
        total_pmi=pmi_monthly * n_payments,
        interest_rate=inputs.interest_rate,
        loan_term_years=inputs.loan_term_years,
        monthly_rate=_monthly_rate(inputs.interest_rate),
    )


def generate_amortization_table(
    inputs: LoanInputs,
    start_date: date | None = None,
) -> list[AmortizationEntry]:
    """Payment-by-payment schedule, first payment one month after ``start_date``.

    Stops at the nominal payment count or as soon as the balance is within
    a cent of zero, whichever comes first. A cash purchase has no payments.
    """
    if start_date is None:
        start_date = date.today()

    calculation = calculate_mortgage(inputs)
    monthly_payment = calculation.principal_and_interest
    monthly_rate = calculation.monthly_rate
    n_payments = inputs.loan_term_years * 12

    table: list[AmortizationEntry] = []
    if inputs.loan_amount <= 0:
        return table

    balance = inputs.loan_amount
    cumulative_interest = 0.0
    cumulative_principal = 0.0

    for payment_number in range(1, n_payments + 1):
        interest_payment = balance * monthly_rate
        principal_payment = monthly_payment - interest_payment
        ending_balance = max(0.0, balance - principal_payment)

        cumulative_interest += interest_payment
        cumulative_principal += principal_payment

        table.append(
            AmortizationEntry(
                payment_number=payment_number,
                payment_date=to_date_string(add_months(start_date, payment_number)),
                beginning_balance=balance,
                monthly_payment=monthly_payment,
                principal_payment=principal_payment,
                interest_payment=interest_payment,
                ending_balance=ending_balance,
                cumulative_interest=cumulative_interest,
                cumulative_principal=cumulative_principal,
            )
        )

        balance = ending_balance
        if balance <= PAYOFF_TOLERANCE:
            break

    return table


# ---------------------------------------------------------------------------
# Point-in-time lookups
# ---------------------------------------------------------------------------


PointInTimeMetric = Literal["principal_paid", "remaining_balance", "interest_paid"]

_PICKERS: dict[str, Callable[[AmortizationEntry], float]] = {
    "principal_paid": lambda e: e.cumulative_principal,
    "remaining_balance": lambda e: e.ending_balance,
    "interest_paid": lambda e: e.cumulative_interest,
}


def find_entry_by_date(
    inputs: LoanInputs,
    target_date: date,
    start_date: date | None = None,
) -> AmortizationEntry | None:
    """Return the entry whose payment date equals ``target_date``, if any."""
    target = to_date_string(target_date)
    for entry in generate_amortization_table(inputs, start_date):
        if entry.payment_date == target:
            return entry
    return None


def lookup_by_date(
    inputs: LoanInputs,
    metric: PointInTimeMetric,
    target_date: date,
    start_date: date | None = None,
) -> tuple[float, bool]:
    """Value of ``metric`` on ``target_date`` and whether a payment falls on it.

    Exact date match only. Without one, nothing counts as paid and the
    balance is the full loan amount.
    """
    entry = find_entry_by_date(inputs, target_date, start_date)
    if entry is not None:
        return _PICKERS[metric](entry), True
    default = inputs.loan_amount if metric == "remaining_balance" else 0.0
    return default, False


def calculate_principal_paid_by_date(
    inputs: LoanInputs,
    target_date: date,
    start_date: date | None = None,
) -> float:
    """Cumulative principal paid as of the payment on ``target_date`` (else 0)."""
    value, _ = lookup_by_date(inputs, "principal_paid", target_date, start_date)
    return value


def calculate_remaining_balance(
    inputs: LoanInputs,
    target_date: date,
    start_date: date | None = None,
) -> float:
    """Balance after the payment on ``target_date`` (else the full loan amount)."""
    value, _ = lookup_by_date(inputs, "remaining_balance", target_date, start_date)
    return value


def calculate_interest_paid_by_date(
    inputs: LoanInputs,
    target_date: date,
    start_date: date | None = None,
) -> float:
    """Cumulative interest paid as of the payment on ``target_date`` (else 0)."""
    value, _ = lookup_by_date(inputs, "interest_paid", target_date, start_date)
    return value
