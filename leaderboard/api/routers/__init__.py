"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .pages import router as pages_router
from .points import router as points_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    leaderboard_router,
    users_router,
    points_router,
    pages_router,
)

__all__ = ["ALL_ROUTERS"]
