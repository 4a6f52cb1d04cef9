"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..services.users import INTERNAL_ERROR
from ..storage import StoreError
from .routers import ALL_ROUTERS

log = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    log.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": INTERNAL_ERROR}, status_code=500)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)
    app.add_exception_handler(StoreError, store_error_handler)


__all__ = ["register_routes"]
