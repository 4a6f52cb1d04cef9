"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...core import get_store
from ...models import user_to_dict
from ...services import get_leaderboard_for_period, parse_period
from ...storage import RecordStore

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(periodo: Optional[str] = None, store: RecordStore = Depends(get_store)):
    """Ranked users for the requested period; unknown periods mean total."""

    period = parse_period(periodo)
    return [user_to_dict(user) for user in get_leaderboard_for_period(store, period)]


__all__ = ["router"]
