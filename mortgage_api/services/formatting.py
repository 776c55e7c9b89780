# This project was developed with assistance from AI tools.
"""Display formatting and loan ratios."""


def format_currency(amount: float) -> str:
    """Format as US dollars, e.g. ``$1,234.56`` or ``-$1,234.56``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percentage(rate: float) -> str:
    return f"{rate:.3f}%"


def calculate_ltv(loan_amount: float, purchase_price: float) -> float:
    """Loan-to-value ratio in percent. Zero when there is no purchase price."""
    if purchase_price == 0:
        return 0.0
    return loan_amount / purchase_price * 100


def calculate_dti(monthly_debt_payments: float, monthly_gross_income: float) -> float:
    """Debt-to-income ratio in percent (simplified). Zero without income."""
    if monthly_gross_income == 0:
        return 0.0
    return monthly_debt_payments / monthly_gross_income * 100
