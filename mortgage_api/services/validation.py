# This project was developed with assistance from AI tools.
"""Range checks for mortgage calculator inputs.

Pure function run before any calculation. Every check is independent so the
caller gets the full list of problems in one pass.
"""

from ..schemas.calculator import LoanInputs

MAX_INTEREST_RATE = 50
MIN_TERM_YEARS = 1
MAX_TERM_YEARS = 50
MAX_PMI_RATE = 10


class InvalidLoanInputs(Exception):
    """Raised at the API boundary when inputs fail validation."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_inputs(inputs: LoanInputs) -> list[str]:
    """Return human-readable errors for ``inputs``; empty when valid.

    Loan amount is not checked: zero is a cash purchase, and the amount is
    derived from purchase price minus down payment by the client.
    """
    errors: list[str] = []

    if inputs.interest_rate < 0 or inputs.interest_rate > MAX_INTEREST_RATE:
        errors.append("Interest rate must be between 0% and 50%")

    if inputs.loan_term_years < MIN_TERM_YEARS or inputs.loan_term_years > MAX_TERM_YEARS:
        errors.append("Loan term must be between 1 and 50 years")

    if inputs.down_payment < 0:
        errors.append("Down payment cannot be negative")

    purchase_price = inputs.loan_amount + inputs.down_payment
    if inputs.down_payment > purchase_price:
        errors.append("Down payment cannot be greater than purchase price")

    if inputs.property_tax_annual < 0:
        errors.append("Property tax cannot be negative")

    if inputs.home_insurance_annual < 0:
        errors.append("Home insurance cannot be negative")

    if inputs.pmi_rate is not None and (inputs.pmi_rate < 0 or inputs.pmi_rate > MAX_PMI_RATE):
        errors.append("PMI rate must be between 0% and 10%")

    if inputs.hoa_fees is not None and inputs.hoa_fees < 0:
        errors.append("HOA fees cannot be negative")

    if inputs.closing_costs is not None and inputs.closing_costs < 0:
        errors.append("Closing costs cannot be negative")

    return errors


def ensure_valid(inputs: LoanInputs) -> None:
    """Raise InvalidLoanInputs carrying every error, if there are any."""
    errors = validate_inputs(inputs)
    if errors:
        raise InvalidLoanInputs(errors)
