# This project was developed with assistance from AI tools.
"""Spreadsheet export of a mortgage calculation.

Renders a two-sheet workbook (Summary, Amortization) with pandas/openpyxl,
uploads it to object storage, and hands back the object key plus a
presigned download URL.
"""

import io
import logging

import pandas as pd
from botocore.exceptions import BotoCoreError, ClientError

from ..core.config import settings
from ..schemas.calculator import AmortizationEntry, CalculationResult, LoanInputs
from ..schemas.export import ExportResult
from .formatting import calculate_ltv
from .storage import XLSX_CONTENT_TYPE, StorageService, get_storage_service

logger = logging.getLogger(__name__)

SUMMARY_SHEET = "Summary"
AMORTIZATION_SHEET = "Amortization"

AMORTIZATION_COLUMNS = [
    "Payment #",
    "Date",
    "Beginning Balance",
    "Payment",
    "Principal",
    "Interest",
    "Ending Balance",
    "Cumulative Interest",
]


class ExportError(Exception):
    """Raised when a workbook cannot be built or published."""


def build_summary_rows(
    inputs: LoanInputs,
    calculation: CalculationResult,
) -> list[list[object]]:
    """Label/value rows for the Summary sheet; blank rows separate sections."""
    ltv = calculate_ltv(inputs.loan_amount, calculation.purchase_price)
    return [
        ["Mortgage Calculator Summary", ""],
        ["", ""],
        ["Loan Details", ""],
        ["Purchase Price", calculation.purchase_price],
        ["Down Payment", inputs.down_payment],
        ["Loan Amount", inputs.loan_amount],
        ["Interest Rate", f"{inputs.interest_rate}%"],
        ["Loan Term", f"{inputs.loan_term_years} years"],
        ["", ""],
        ["Monthly Payments", ""],
        ["Principal & Interest", calculation.principal_and_interest],
        ["Property Tax", calculation.property_tax_monthly],
        ["Home Insurance", calculation.home_insurance_monthly],
        ["PMI", calculation.pmi_monthly],
        ["HOA Fees", calculation.hoa_fees_monthly],
        ["Total Monthly Payment", calculation.total_monthly_payment],
        ["", ""],
        ["Total Costs", ""],
        ["Total Interest", calculation.total_interest],
        ["Total PMI", calculation.total_pmi],
        ["Total Payments", calculation.total_payments],
        ["", ""],
        ["Loan Metrics", ""],
        ["Loan-to-Value (LTV)", f"{ltv:.2f}%"],
        ["Monthly Rate", f"{calculation.monthly_rate * 100:.4f}%"],
        ["Number of Payments", calculation.loan_term_years * 12],
    ]


def build_amortization_frame(
    amortization: list[AmortizationEntry],
    max_rows: int,
) -> pd.DataFrame:
    """First ``max_rows`` payments, plus a note row when the schedule is longer."""
    rows = [
        [
            entry.payment_number,
            entry.payment_date,
            entry.beginning_balance,
            entry.monthly_payment,
            entry.principal_payment,
            entry.interest_payment,
            entry.ending_balance,
            entry.cumulative_interest,
        ]
        for entry in amortization[:max_rows]
    ]
    if len(amortization) > max_rows:
        note = f"Note: Showing first {max_rows} payments only"
        rows.append([note] + [None] * (len(AMORTIZATION_COLUMNS) - 1))
    return pd.DataFrame(rows, columns=AMORTIZATION_COLUMNS)


def build_workbook(
    inputs: LoanInputs,
    calculation: CalculationResult,
    amortization: list[AmortizationEntry],
    scenario_name: str,
    max_rows: int,
) -> bytes:
    """Render the export workbook to xlsx bytes."""
    summary = pd.DataFrame(build_summary_rows(inputs, calculation))
    schedule = build_amortization_frame(amortization, max_rows)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        summary.to_excel(writer, sheet_name=SUMMARY_SHEET, index=False, header=False)
        schedule.to_excel(writer, sheet_name=AMORTIZATION_SHEET, index=False)
        writer.book.properties.title = f"Mortgage Calculator - {scenario_name}"
    return out.getvalue()


class SpreadsheetExportService:
    """Publishes calculation snapshots as downloadable workbooks.

    Without an explicit ``storage`` the shared StorageService is acquired on
    the first export, so connection failures surface as ExportError.
    """

    def __init__(
        self,
        storage: StorageService | None = None,
        max_rows: int = 100,
        url_ttl_seconds: int = 3600,
    ):
        self._storage = storage
        self._max_rows = max_rows
        self._url_ttl_seconds = url_ttl_seconds

    async def export_mortgage_calculation(
        self,
        inputs: LoanInputs,
        calculation: CalculationResult,
        amortization: list[AmortizationEntry],
        scenario_name: str,
    ) -> ExportResult:
        """Build, upload and link the workbook for one scenario."""
        workbook = build_workbook(
            inputs, calculation, amortization, scenario_name, self._max_rows
        )
        object_key = StorageService.build_export_key(scenario_name)

        try:
            storage = self._storage or get_storage_service()
            await storage.upload_file(workbook, object_key, XLSX_CONTENT_TYPE)
            url = await storage.get_download_url(
                object_key, expires_in=self._url_ttl_seconds
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Spreadsheet export failed for %r", scenario_name)
            raise ExportError(f"Could not publish spreadsheet: {exc}") from exc

        logger.info(
            "Exported scenario %r to %s (%d payments)",
            scenario_name,
            object_key,
            len(amortization),
        )
        return ExportResult(spreadsheet_id=object_key, url=url)


def get_export_service() -> SpreadsheetExportService:
    """FastAPI dependency returning an export service over the shared storage."""
    return SpreadsheetExportService(
        max_rows=settings.EXPORT_MAX_AMORTIZATION_ROWS,
        url_ttl_seconds=settings.EXPORT_URL_TTL_SECONDS,
    )
