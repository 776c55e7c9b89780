# This project was developed with assistance from AI tools.
"""Spreadsheet export schemas."""

from datetime import date

from pydantic import BaseModel, Field

from .calculator import LoanInputs


class ExportRequest(BaseModel):
    """Export an unsaved calculation; results are recomputed from the inputs."""

    scenario_name: str = Field(min_length=1, max_length=200)
    inputs: LoanInputs
    start_date: date | None = None


class ExportResult(BaseModel):
    """Where the exported workbook can be fetched."""

    spreadsheet_id: str = Field(description="Object key of the uploaded workbook.")
    url: str = Field(description="Presigned download URL.")
