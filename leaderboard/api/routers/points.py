"""Point adjustment endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core import get_store
from ...services import adjust_points
from ...storage import RecordStore

router = APIRouter(tags=["points"])


@router.post("/puntos")
def update_points(body: Dict[str, Any], store: RecordStore = Depends(get_store)):
    """Add or remove one point for the user behind ``codigo_usuario``."""

    code = body.get("codigo_usuario")
    operation = body.get("operacion")

    if not code or not isinstance(code, str):
        return JSONResponse(
            {"success": False, "message": "Código de usuario es requerido"},
            status_code=400,
        )

    result = adjust_points(store, code, operation)
    status_code = 200 if result.success else 400
    return JSONResponse(result.model_dump(exclude_none=True), status_code=status_code)


__all__ = ["router"]
