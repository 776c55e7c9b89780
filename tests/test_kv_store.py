# This project was developed with assistance from AI tools.
"""Tests for the key-value store backends."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from botocore.exceptions import ClientError

from mortgage_api.core.config import settings
from mortgage_api.services import kv_store
from mortgage_api.services.kv_store import (
    FileKeyValueStore,
    ObjectKeyValueStore,
    get_key_value_store,
    init_key_value_store,
)

from .factories import make_mock_storage

# ---------------------------------------------------------------------------
# File backend
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_file_missing_key_returns_none(kv_store):
    assert await kv_store.get("absent") is None


@pytest.mark.asyncio
async def test_file_set_get_remove(kv_store):
    await kv_store.set("scenarios", '[{"id": 1}]')
    assert await kv_store.get("scenarios") == '[{"id": 1}]'
    assert (kv_store.base_dir / "scenarios.json").exists()

    await kv_store.remove("scenarios")
    assert await kv_store.get("scenarios") is None


@pytest.mark.asyncio
async def test_file_set_overwrites(kv_store):
    await kv_store.set("k", "one")
    await kv_store.set("k", "two")
    assert await kv_store.get("k") == "two"


@pytest.mark.asyncio
async def test_file_remove_missing_key_is_noop(kv_store):
    await kv_store.remove("never-written")


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden"])
async def test_file_rejects_unsafe_keys(kv_store, key):
    with pytest.raises(ValueError):
        await kv_store.set(key, "x")


@pytest.mark.asyncio
async def test_file_io_runs_off_the_event_loop(kv_store):
    loop = asyncio.get_running_loop()
    with patch.object(loop, "run_in_executor", wraps=loop.run_in_executor) as run:
        await kv_store.set("k", "v")
        assert await kv_store.get("k") == "v"
        await kv_store.remove("k")

    assert run.call_count == 3
    assert all(call.args[0] is None for call in run.call_args_list)


# ---------------------------------------------------------------------------
# Object storage backend
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_object_set_uploads_json():
    storage = make_mock_storage()
    store = ObjectKeyValueStore(storage, prefix="kv/")

    await store.set("scenarios", "[]")

    storage.upload_file.assert_awaited_once_with(b"[]", "kv/scenarios.json", "application/json")


@pytest.mark.asyncio
async def test_object_get_decodes():
    storage = make_mock_storage()
    storage.download_file = AsyncMock(return_value=b'{"a": 1}')
    store = ObjectKeyValueStore(storage)

    assert await store.get("scenarios") == '{"a": 1}'


@pytest.mark.asyncio
async def test_object_get_missing_returns_none():
    storage = make_mock_storage()
    storage.download_file = AsyncMock(
        side_effect=ClientError({"Error": {"Code": "NoSuchKey"}}, "GetObject")
    )
    assert await ObjectKeyValueStore(storage).get("scenarios") is None


@pytest.mark.asyncio
async def test_object_get_propagates_other_errors():
    storage = make_mock_storage()
    storage.download_file = AsyncMock(
        side_effect=ClientError({"Error": {"Code": "AccessDenied"}}, "GetObject")
    )
    with pytest.raises(ClientError):
        await ObjectKeyValueStore(storage).get("scenarios")


@pytest.mark.asyncio
async def test_object_remove_deletes():
    storage = make_mock_storage()
    await ObjectKeyValueStore(storage, prefix="p/").remove("k")
    storage.delete_file.assert_awaited_once_with("p/k.json")


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------


def test_init_file_backend(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "SCENARIO_BACKEND", "file")
    monkeypatch.setattr(settings, "SCENARIO_DATA_DIR", str(tmp_path))
    monkeypatch.setattr(kv_store, "_store", None)

    store = init_key_value_store(settings)

    assert isinstance(store, FileKeyValueStore)
    assert store.base_dir == tmp_path
    assert get_key_value_store() is store


def test_init_s3_backend(monkeypatch):
    monkeypatch.setattr(settings, "SCENARIO_BACKEND", "s3")
    monkeypatch.setattr(kv_store, "_store", None)

    with patch(
        "mortgage_api.services.kv_store.get_storage_service", return_value=make_mock_storage()
    ):
        store = init_key_value_store(settings)

    assert isinstance(store, ObjectKeyValueStore)


def test_get_before_init_raises(monkeypatch):
    monkeypatch.setattr(kv_store, "_store", None)
    with pytest.raises(RuntimeError):
        get_key_value_store()
