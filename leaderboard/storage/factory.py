"""Build the record store selected by configuration."""

from __future__ import annotations

from ..core.config import (
    DATA_FILE,
    KV_REST_API_TOKEN,
    KV_REST_API_URL,
    KV_TIMEOUT_SEC,
    REDIS_URL,
    STORE_BACKEND,
    STORE_KEY_PREFIX,
)
from .base import RecordStore
from .json_file import JsonFileStore
from .memory import MemoryStore
from .redis_store import RedisStore
from .rest_kv import RestKVStore


def open_store(backend: str = STORE_BACKEND) -> RecordStore:
    """Construct the configured store; the caller owns ``open``/``close``."""

    if backend == "json":
        return JsonFileStore(DATA_FILE)
    if backend == "redis":
        return RedisStore(REDIS_URL, prefix=STORE_KEY_PREFIX)
    if backend == "kv":
        return RestKVStore(
            KV_REST_API_URL,
            KV_REST_API_TOKEN,
            prefix=STORE_KEY_PREFIX,
            timeout=KV_TIMEOUT_SEC,
        )
    if backend == "memory":
        return MemoryStore(prefix=STORE_KEY_PREFIX)
    raise RuntimeError(f"Unknown STORE_BACKEND: {backend}")


__all__ = ["open_store"]
