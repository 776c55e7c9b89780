# This project was developed with assistance from AI tools.
"""Tests for exporting an unsaved calculation."""

from unittest.mock import AsyncMock

from botocore.exceptions import EndpointConnectionError

from mortgage_api.main import app as real_app
from mortgage_api.services.export import get_export_service

from .factories import REFERENCE_INPUTS


def _body(**overrides):
    inputs = dict(REFERENCE_INPUTS)
    inputs.update(overrides)
    return {"scenario_name": "What if", "inputs": inputs, "start_date": "2025-06-01"}


def test_export_spreadsheet(client, mock_storage):
    response = client.post("/api/export/spreadsheet", json=_body())

    assert response.status_code == 200
    data = response.json()
    assert data["spreadsheet_id"].startswith("exports/")
    assert data["spreadsheet_id"].endswith("/what-if.xlsx")
    assert data["url"] == "https://storage.example.com/exports/book.xlsx"

    workbook, key, _ = mock_storage.upload_file.await_args.args
    assert key == data["spreadsheet_id"]
    assert len(workbook) > 0


def test_export_rejects_invalid_inputs(client, mock_storage):
    response = client.post("/api/export/spreadsheet", json=_body(closing_costs=-1))

    assert response.status_code == 422
    assert response.json()["errors"] == ["Closing costs cannot be negative"]
    mock_storage.upload_file.assert_not_awaited()


def test_export_requires_name(client):
    body = _body()
    body["scenario_name"] = ""
    assert client.post("/api/export/spreadsheet", json=body).status_code == 422


def test_export_storage_unreachable(client, mock_storage):
    mock_storage.upload_file = AsyncMock(
        side_effect=EndpointConnectionError(endpoint_url="http://minio:9000")
    )

    response = client.post("/api/export/spreadsheet", json=_body())

    assert response.status_code == 502
    body = response.json()
    assert body["title"] == "Bad Gateway"
    assert "Could not publish spreadsheet" in body["detail"]


def test_export_connects_to_storage_lazily(client, unreachable_storage):
    """The real export dependency only reaches S3 once an export starts."""
    real_app.dependency_overrides.pop(get_export_service)

    response = client.post("/api/export/spreadsheet", json=_body())

    assert response.status_code == 502
    assert response.json()["title"] == "Bad Gateway"


def test_export_invalid_inputs_do_not_touch_storage(client, unreachable_storage):
    real_app.dependency_overrides.pop(get_export_service)

    response = client.post("/api/export/spreadsheet", json=_body(down_payment=-1))

    assert response.status_code == 422
    unreachable_storage.head_bucket.assert_not_called()
