# This project was developed with assistance from AI tools.
"""Saved scenario CRUD routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from ..schemas import Pagination
from ..schemas.calculator import LoanInputs
from ..schemas.export import ExportResult
from ..schemas.scenario import (
    SavedScenario,
    ScenarioCreate,
    ScenarioImportResponse,
    ScenarioListResponse,
    ScenarioSummary,
    ScenarioUpdate,
)
from ..services.calculator import calculate_mortgage, generate_amortization_table
from ..services.export import SpreadsheetExportService, get_export_service
from ..services.formatting import format_currency, format_percentage
from ..services.scenarios import ScenarioService, get_scenario_service
from ..services.validation import ensure_valid

router = APIRouter()


def _compute(inputs: LoanInputs, start_date: date | None):
    ensure_valid(inputs)
    return calculate_mortgage(inputs), generate_amortization_table(inputs, start_date)


def _summarize(scenario: SavedScenario) -> ScenarioSummary:
    return ScenarioSummary(
        id=scenario.id,
        name=scenario.name,
        total_monthly_payment=scenario.calculation.total_monthly_payment,
        total_monthly_payment_display=format_currency(scenario.calculation.total_monthly_payment),
        interest_rate_display=format_percentage(scenario.inputs.interest_rate),
        created_at=scenario.created_at,
        updated_at=scenario.updated_at,
    )


@router.get("", response_model=ScenarioListResponse)
async def list_scenarios(
    service: ScenarioService = Depends(get_scenario_service),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
) -> ScenarioListResponse:
    """List saved scenarios, most recently updated first."""
    scenarios = await service.get_all_scenarios()
    scenarios.sort(key=lambda s: s.updated_at, reverse=True)
    total = len(scenarios)
    return ScenarioListResponse(
        data=[_summarize(s) for s in scenarios[offset : offset + limit]],
        pagination=Pagination(
            total=total,
            offset=offset,
            limit=limit,
            has_more=(offset + limit < total),
        ),
    )


@router.post("", response_model=SavedScenario, status_code=201)
async def create_scenario(
    body: ScenarioCreate,
    service: ScenarioService = Depends(get_scenario_service),
) -> SavedScenario:
    """Validate, calculate and save a new scenario."""
    calculation, amortization = _compute(body.inputs, body.start_date)
    return await service.save_scenario(body.name, body.inputs, calculation, amortization)


@router.delete("", status_code=204)
async def clear_scenarios(
    service: ScenarioService = Depends(get_scenario_service),
) -> Response:
    """Delete every saved scenario."""
    await service.clear_all_scenarios()
    return Response(status_code=204)


@router.get("/export")
async def export_scenarios(
    service: ScenarioService = Depends(get_scenario_service),
) -> Response:
    """Download every saved scenario as a JSON file."""
    payload = await service.export_scenarios()
    return Response(
        content=payload,
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="mortgage-scenarios.json"'},
    )


@router.post("/import", response_model=ScenarioImportResponse)
async def import_scenarios(
    request: Request,
    service: ScenarioService = Depends(get_scenario_service),
) -> ScenarioImportResponse:
    """Replace all scenarios with a JSON array from ``/export``."""
    imported = await service.import_scenarios(await request.body())
    if imported is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Import data must be a JSON array of saved scenarios",
        )
    return ScenarioImportResponse(imported=len(imported))


@router.get("/{scenario_id}", response_model=SavedScenario)
async def get_scenario(
    scenario_id: str,
    service: ScenarioService = Depends(get_scenario_service),
) -> SavedScenario:
    scenario = await service.get_scenario(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return scenario


@router.put("/{scenario_id}", response_model=SavedScenario)
async def update_scenario(
    scenario_id: str,
    body: ScenarioUpdate,
    service: ScenarioService = Depends(get_scenario_service),
) -> SavedScenario:
    """Recalculate a scenario from new inputs, keeping its id and creation time."""
    calculation, amortization = _compute(body.inputs, body.start_date)
    scenario = await service.update_scenario(
        scenario_id, body.name, body.inputs, calculation, amortization
    )
    if scenario is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return scenario


@router.delete("/{scenario_id}", status_code=204)
async def delete_scenario(
    scenario_id: str,
    service: ScenarioService = Depends(get_scenario_service),
) -> Response:
    if not await service.delete_scenario(scenario_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return Response(status_code=204)


@router.post("/{scenario_id}/export", response_model=ExportResult)
async def export_scenario_spreadsheet(
    scenario_id: str,
    service: ScenarioService = Depends(get_scenario_service),
    exporter: SpreadsheetExportService = Depends(get_export_service),
) -> ExportResult:
    """Publish a saved scenario's stored snapshot as a spreadsheet."""
    scenario = await service.get_scenario(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return await exporter.export_mortgage_calculation(
        scenario.inputs, scenario.calculation, scenario.amortization, scenario.name
    )
