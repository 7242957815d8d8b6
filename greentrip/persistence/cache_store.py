"""Key-value store for cached emissions reports.

``CacheStore`` is the interface the reporting service depends on;
``DiskCacheStore`` is the production implementation backed by
``diskcache`` (SQLite on local disk, safe across threads and worker
processes, per-key atomic get/set/delete).

Calls are synchronous and run inline in the async request handlers. A
store backed by a network service must be called through
``fastapi.concurrency.run_in_threadpool`` instead.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Protocol

from diskcache import Cache, Timeout

from greentrip.persistence.errors import CacheStoreError

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = "./.cache/reports"


class CacheStore(Protocol):
    """Minimal key-value cache contract. ``get`` returns None on a miss."""

    def get(self, key: str) -> Any | None: ...

    def put(self, key: str, value: Any, ttl_seconds: int) -> None: ...

    def delete(self, key: str) -> None: ...


class DiskCacheStore:
    """``CacheStore`` on top of a ``diskcache.Cache`` directory."""

    def __init__(self, directory: str | Path | None = None, size_limit: int = 2**28):
        self.directory = Path(
            directory or os.environ.get("GREENTRIP_CACHE_DIR", DEFAULT_CACHE_DIR)
        )
        self._cache: Cache | None = None
        self._size_limit = size_limit

    @property
    def is_ready(self) -> bool:
        return self._cache is not None

    def open(self) -> None:
        if self._cache is not None:
            return
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._cache = Cache(directory=str(self.directory), size_limit=self._size_limit)
        except (sqlite3.Error, OSError) as exc:
            raise CacheStoreError(f"cannot open report cache at {self.directory}: {exc}") from exc
        logger.info("Report cache opened at %s", self.directory)

    def close(self) -> None:
        if self._cache is not None:
            self._cache.close()
            self._cache = None

    def _require(self) -> Cache:
        if self._cache is None:
            self.open()
        return self._cache

    def get(self, key: str) -> Any | None:
        try:
            return self._require().get(key, default=None)
        except (Timeout, sqlite3.Error, OSError) as exc:
            raise CacheStoreError(f"cache read failed for {key}: {exc}") from exc

    def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            self._require().set(key, value, expire=ttl_seconds)
        except (Timeout, sqlite3.Error, OSError) as exc:
            raise CacheStoreError(f"cache write failed for {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._require().delete(key)
        except (Timeout, sqlite3.Error, OSError) as exc:
            raise CacheStoreError(f"cache delete failed for {key}: {exc}") from exc
