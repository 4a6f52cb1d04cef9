"""Request helpers for the record store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from ..storage import RecordStore


def get_store(request: Request) -> "RecordStore":
    """FastAPI dependency returning the store opened by the app lifespan."""

    return request.app.state.store


__all__ = ["get_store"]
