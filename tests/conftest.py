# This project was developed with assistance from AI tools.
"""Shared fixtures.

The real app from ``mortgage_api.main`` is a module singleton. ``client``
points the scenario and export dependencies at a temporary directory and a
mock object store, and clears the overrides after every test.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import EndpointConnectionError
from fastapi.testclient import TestClient

from mortgage_api.main import app as real_app
from mortgage_api.services import storage as storage_module
from mortgage_api.services.export import SpreadsheetExportService, get_export_service
from mortgage_api.services.kv_store import FileKeyValueStore
from mortgage_api.services.scenarios import ScenarioService, get_scenario_service

from .factories import make_mock_storage


@pytest.fixture
def kv_store(tmp_path):
    return FileKeyValueStore(tmp_path / "scenarios")


@pytest.fixture
def scenario_service(kv_store):
    return ScenarioService(kv_store)


@pytest.fixture
def mock_storage():
    return make_mock_storage()


@pytest.fixture
def client(scenario_service, mock_storage):
    """TestClient over the real app with file-backed scenarios and mock S3."""
    real_app.dependency_overrides[get_scenario_service] = lambda: scenario_service
    real_app.dependency_overrides[get_export_service] = lambda: SpreadsheetExportService(
        mock_storage, max_rows=100
    )
    yield TestClient(real_app)
    real_app.dependency_overrides.clear()


@pytest.fixture
def unreachable_storage(monkeypatch):
    """No StorageService yet, and any boto3 client cannot reach its endpoint."""
    s3 = MagicMock()
    s3.head_bucket.side_effect = EndpointConnectionError(endpoint_url="http://127.0.0.1:1")
    monkeypatch.setattr(storage_module, "_service", None)
    monkeypatch.setattr(storage_module.boto3, "client", lambda *args, **kwargs: s3)
    return s3
