"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core import get_store
from ...storage import RecordStore

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config(store: RecordStore = Depends(get_store)) -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {"store_backend": store.name}


__all__ = ["router"]
