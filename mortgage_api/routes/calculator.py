# This project was developed with assistance from AI tools.
"""Calculator routes -- stateless, no persistence."""

from datetime import date

from fastapi import APIRouter

from ..schemas.calculator import (
    AmortizationRequest,
    AmortizationResponse,
    CalculationResult,
    LoanInputs,
    PointInTimeRequest,
    PointInTimeResponse,
    ValidationResponse,
)
from ..services.calculator import (
    PointInTimeMetric,
    calculate_mortgage,
    generate_amortization_table,
    lookup_by_date,
)
from ..services.validation import ensure_valid, validate_inputs

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
async def validate(inputs: LoanInputs) -> ValidationResponse:
    """Report every range problem with the inputs without calculating."""
    errors = validate_inputs(inputs)
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/calculate", response_model=CalculationResult)
async def calculate(inputs: LoanInputs) -> CalculationResult:
    """Monthly payment breakdown and lifetime totals."""
    ensure_valid(inputs)
    return calculate_mortgage(inputs)


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(req: AmortizationRequest) -> AmortizationResponse:
    """Calculation plus the full payment schedule starting after ``start_date``."""
    ensure_valid(req.inputs)
    return AmortizationResponse(
        calculation=calculate_mortgage(req.inputs),
        amortization=generate_amortization_table(req.inputs, req.start_date or date.today()),
    )


def _point_in_time(req: PointInTimeRequest, metric: PointInTimeMetric) -> PointInTimeResponse:
    ensure_valid(req.inputs)
    value, matched = lookup_by_date(req.inputs, metric, req.target_date, req.start_date)
    return PointInTimeResponse(target_date=req.target_date, value=value, matched=matched)


@router.post("/principal-paid", response_model=PointInTimeResponse)
async def principal_paid(req: PointInTimeRequest) -> PointInTimeResponse:
    """Cumulative principal paid as of the payment due on ``target_date``."""
    return _point_in_time(req, "principal_paid")


@router.post("/remaining-balance", response_model=PointInTimeResponse)
async def remaining_balance(req: PointInTimeRequest) -> PointInTimeResponse:
    """Balance left after the payment due on ``target_date``.

    Dates that are not payment dates return the original loan amount.
    """
    return _point_in_time(req, "remaining_balance")


@router.post("/interest-paid", response_model=PointInTimeResponse)
async def interest_paid(req: PointInTimeRequest) -> PointInTimeResponse:
    """Cumulative interest paid as of the payment due on ``target_date``."""
    return _point_in_time(req, "interest_paid")
