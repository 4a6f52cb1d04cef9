"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATA_FILE,
    KV_REST_API_TOKEN,
    KV_REST_API_URL,
    KV_TIMEOUT_SEC,
    LOG_LEVEL,
    REDIS_URL,
    RELOAD,
    STORE_BACKEND,
    STORE_KEY_PREFIX,
)
from .database import get_store
from .logs import configure_logging
from .time import isoformat, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATA_FILE",
    "KV_REST_API_TOKEN",
    "KV_REST_API_URL",
    "KV_TIMEOUT_SEC",
    "LOG_LEVEL",
    "REDIS_URL",
    "RELOAD",
    "STORE_BACKEND",
    "STORE_KEY_PREFIX",
    "configure_logging",
    "get_store",
    "isoformat",
    "utcnow",
]
