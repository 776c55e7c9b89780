# This project was developed with assistance from AI tools.
"""Spreadsheet export route for unsaved calculations."""

from fastapi import APIRouter, Depends

from ..schemas.export import ExportRequest, ExportResult
from ..services.calculator import calculate_mortgage, generate_amortization_table
from ..services.export import SpreadsheetExportService, get_export_service
from ..services.validation import ensure_valid

router = APIRouter()


@router.post("/spreadsheet", response_model=ExportResult)
async def export_spreadsheet(
    req: ExportRequest,
    exporter: SpreadsheetExportService = Depends(get_export_service),
) -> ExportResult:
    """Calculate from the inputs and publish the result as a workbook.

    Storage failures surface as 502 via the ExportError handler.
    """
    ensure_valid(req.inputs)
    return await exporter.export_mortgage_calculation(
        req.inputs,
        calculate_mortgage(req.inputs),
        generate_amortization_table(req.inputs, req.start_date),
        req.scenario_name,
    )
