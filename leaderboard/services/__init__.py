"""Service layer: domain operations on top of a record store."""

from .points import adjust_points
from .stats import (
    Period,
    get_leaderboard,
    get_leaderboard_for_period,
    get_summary,
    get_user_stats,
    parse_period,
)
from .users import get_user_by_code, register_user

__all__ = [
    "Period",
    "adjust_points",
    "get_leaderboard",
    "get_leaderboard_for_period",
    "get_summary",
    "get_user_by_code",
    "get_user_stats",
    "parse_period",
    "register_user",
]
