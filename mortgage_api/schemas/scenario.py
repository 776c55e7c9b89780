# This project was developed with assistance from AI tools.
"""Saved scenario request/response schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from . import Pagination
from .calculator import AmortizationEntry, CalculationResult, LoanInputs


class SavedScenario(BaseModel):
    """A named snapshot of inputs plus the results computed from them."""

    id: str
    name: str
    inputs: LoanInputs
    calculation: CalculationResult
    amortization: list[AmortizationEntry]
    created_at: datetime
    updated_at: datetime


class ScenarioCreate(BaseModel):
    """Save a new scenario. Results are recomputed server-side."""

    name: str = Field(min_length=1, max_length=200)
    inputs: LoanInputs
    start_date: date | None = None


class ScenarioUpdate(BaseModel):
    """Replace the name and inputs of an existing scenario."""

    name: str = Field(min_length=1, max_length=200)
    inputs: LoanInputs
    start_date: date | None = None


class ScenarioSummary(BaseModel):
    """Scenario list item without the amortization schedule."""

    id: str
    name: str
    total_monthly_payment: float
    total_monthly_payment_display: str = Field(description="Formatted as US dollars.")
    interest_rate_display: str = Field(description="Rate with three decimals and a percent sign.")
    created_at: datetime
    updated_at: datetime


class ScenarioListResponse(BaseModel):
    """Paginated list of saved scenarios."""

    data: list[ScenarioSummary]
    pagination: Pagination


class ScenarioImportResponse(BaseModel):
    """Result of replacing the store from a JSON export."""

    imported: int
