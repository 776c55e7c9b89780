# This project was developed with assistance from AI tools.
"""Shared test factory functions for inputs and mock collaborators.

Keeps the reference loan and the storage mock consistent across test suites.
"""

from unittest.mock import AsyncMock, MagicMock

from mortgage_api.schemas.calculator import LoanInputs

REFERENCE_INPUTS = {
    "loan_amount": 300000,
    "interest_rate": 6.5,
    "loan_term_years": 30,
    "property_tax_annual": 3600,
    "home_insurance_annual": 1200,
    "pmi_rate": 0.5,
    "hoa_fees": 100,
    "down_payment": 60000,
    "closing_costs": 5000,
}


def make_inputs(**overrides) -> LoanInputs:
    """Build LoanInputs from the reference loan with selected fields replaced.

    Args:
        **overrides: Field values to replace on the reference loan.
            Pass ``None`` to clear an optional field.
    """
    data = dict(REFERENCE_INPUTS)
    data.update(overrides)
    return LoanInputs(**data)


def make_mock_storage(url="https://storage.example.com/exports/book.xlsx"):
    """Create a mock StorageService with async upload/download methods."""
    storage = MagicMock()
    storage.upload_file = AsyncMock(side_effect=lambda data, key, content_type: key)
    storage.download_file = AsyncMock(return_value=b"")
    storage.delete_file = AsyncMock(return_value=None)
    storage.get_download_url = AsyncMock(return_value=url)
    return storage
