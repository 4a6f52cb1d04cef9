"""User registration and lookup endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core import get_store
from ...models import user_to_dict
from ...services import get_leaderboard, get_user_by_code, get_user_stats, register_user
from ...services.points import USER_NOT_FOUND
from ...services.users import NAME_REQUIRED
from ...storage import RecordStore

router = APIRouter(tags=["users"])


def _not_found() -> JSONResponse:
    return JSONResponse({"error": USER_NOT_FOUND}, status_code=404)


@router.get("/usuarios")
def list_users(store: RecordStore = Depends(get_store)):
    """List all users, highest points first."""

    return [user_to_dict(user) for user in get_leaderboard(store)]


@router.post("/usuarios")
def create_user(body: Dict[str, Any], store: RecordStore = Depends(get_store)):
    """Register a user and return its public code."""

    name = body.get("nombre")
    if not name or not isinstance(name, str):
        return JSONResponse({"success": False, "message": NAME_REQUIRED}, status_code=400)

    result = register_user(store, name)
    status_code = 201 if result.success else 400
    return JSONResponse(result.model_dump(exclude_none=True), status_code=status_code)


@router.get("/usuarios/{codigo}")
def get_user(codigo: str, store: RecordStore = Depends(get_store)):
    user = get_user_by_code(store, codigo)
    if not user:
        return _not_found()
    return user_to_dict(user)


@router.get("/usuarios/{codigo}/estadisticas")
def get_stats(codigo: str, store: RecordStore = Depends(get_store)):
    """Per-user counters."""

    stats = get_user_stats(store, codigo)
    if not stats:
        return _not_found()
    return stats.model_dump()


__all__ = ["router"]
