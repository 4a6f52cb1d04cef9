"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Record store ---------------------------------------------------------------
STORE_BACKEND = os.getenv("STORE_BACKEND", "json").strip().lower()
DATA_FILE = Path(os.getenv("DATA_FILE", "data/leaderboard.json"))
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
KV_REST_API_URL = os.getenv("KV_REST_API_URL", "")
KV_REST_API_TOKEN = os.getenv("KV_REST_API_TOKEN", "")
KV_TIMEOUT_SEC = _env_float("KV_TIMEOUT_SEC", 5.0)
STORE_KEY_PREFIX = os.getenv("STORE_KEY_PREFIX", "")


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RELOAD = _env_bool("RELOAD", False)


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
]
