# This project was developed with assistance from AI tools.
"""Flat key-value stores holding JSON documents.

Two backends share one async interface: local JSON files for single-machine
use, and S3-compatible object storage through ``StorageService``. The
module exposes a singleton chosen from settings at app startup via
``init_key_value_store()``.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from functools import partial
from pathlib import Path

from botocore.exceptions import ClientError

from ..core.config import Settings
from .storage import StorageService, get_storage_service, is_missing_key

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String values addressed by flat string keys."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite the value for ``key``."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""


def _check_key(key: str) -> str:
    if not key or "/" in key or "\\" in key or key.startswith("."):
        raise ValueError(f"Invalid storage key: {key!r}")
    return key


class FileKeyValueStore(KeyValueStore):
    """One ``<key>.json`` file per key under ``base_dir``.

    File I/O runs in the default thread-pool executor.
    """

    def __init__(self, base_dir: str | Path):
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _path(self, key: str) -> Path:
        return self._base_dir / f"{_check_key(key)}.json"

    @staticmethod
    def _read(path: Path) -> str | None:
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            return handle.read()

    def _write(self, path: Path, value: str) -> None:
        self._base_dir.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            handle.write(value)

    async def get(self, key: str) -> str | None:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self._read, self._path(key)))

    async def set(self, key: str, value: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._write, self._path(key), value))

    async def remove(self, key: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._path(key).unlink, missing_ok=True))


class ObjectKeyValueStore(KeyValueStore):
    """One ``<prefix><key>.json`` object per key in the storage bucket."""

    def __init__(self, storage: StorageService, prefix: str = "kv/"):
        self._storage = storage
        self._prefix = prefix

    def _object_key(self, key: str) -> str:
        return f"{self._prefix}{_check_key(key)}.json"

    async def get(self, key: str) -> str | None:
        try:
            data = await self._storage.download_file(self._object_key(key))
        except ClientError as exc:
            if is_missing_key(exc):
                return None
            raise
        return data.decode("utf-8")

    async def set(self, key: str, value: str) -> None:
        await self._storage.upload_file(
            value.encode("utf-8"),
            self._object_key(key),
            "application/json",
        )

    async def remove(self, key: str) -> None:
        await self._storage.delete_file(self._object_key(key))


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: KeyValueStore | None = None


def init_key_value_store(cfg: Settings) -> KeyValueStore:
    """Initialise the singleton for the configured backend (app lifespan)."""
    global _store  # noqa: PLW0603
    if cfg.SCENARIO_BACKEND == "s3":
        _store = ObjectKeyValueStore(get_storage_service())
        logger.info("Scenario store: s3 (bucket=%s)", cfg.S3_BUCKET)
    else:
        _store = FileKeyValueStore(cfg.SCENARIO_DATA_DIR)
        logger.info("Scenario store: file (dir=%s)", cfg.SCENARIO_DATA_DIR)
    return _store


def get_key_value_store() -> KeyValueStore:
    """Return the initialised KeyValueStore singleton."""
    if _store is None:
        raise RuntimeError("KeyValueStore not initialised -- call init_key_value_store() first")
    return _store
