"""Interchangeable record store backends."""

from .base import RecordStore, StoreError
from .factory import open_store
from .json_file import JsonFileStore
from .memory import MemoryStore
from .redis_store import RedisStore
from .rest_kv import RestKVStore

__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "RecordStore",
    "RedisStore",
    "RestKVStore",
    "StoreError",
    "open_store",
]
