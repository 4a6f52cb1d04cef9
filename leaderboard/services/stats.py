"""Leaderboard ordering and aggregate statistics."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from ..models import Summary, User, UserStats
from ..storage import RecordStore


class Period(str, Enum):
    DIA = "dia"
    SEMANA = "semana"
    MES = "mes"
    TOTAL = "total"


def parse_period(raw: Optional[str]) -> Period:
    """Map a query value to a period; missing or unknown values mean total."""

    try:
        return Period(raw)
    except ValueError:
        return Period.TOTAL


def rank_users(users: List[User]) -> List[User]:
    # sorted() is stable with reverse=True, so ties keep registration order.
    return sorted(users, key=lambda user: user.puntos, reverse=True)


def get_leaderboard(store: RecordStore) -> List[User]:
    """All users, highest points first."""

    return rank_users(store.load().usuarios)


def get_leaderboard_for_period(store: RecordStore, period: Optional[str] = Period.TOTAL) -> List[User]:
    """Leaderboard for ``period``.

    Orders are not filtered by date yet, so every period, including an
    unknown one, returns the lifetime ranking.
    """

    return get_leaderboard(store)


def get_user_stats(store: RecordStore, code: str) -> Optional[UserStats]:
    snapshot = store.load()
    user = next((u for u in snapshot.usuarios if u.codigo_usuario == code), None)
    if user is None:
        return None

    total_orders = sum(1 for order in snapshot.ordenes if order.codigo_usuario == code)
    # Period counters mirror the lifetime total until date filtering exists.
    return UserStats(
        nombre=user.nombre,
        puntos=user.puntos,
        ordenes_hoy=user.puntos,
        ordenes_semana=user.puntos,
        ordenes_mes=user.puntos,
        ordenes_total=total_orders,
    )


def get_summary(store: RecordStore) -> Summary:
    """Totals for the admin panel; the average rounds half up."""

    snapshot = store.load()
    users = len(snapshot.usuarios)
    points = sum(user.puntos for user in snapshot.usuarios)
    return Summary(
        total_usuarios=users,
        total_puntos=points,
        total_ordenes=len(snapshot.ordenes),
        promedio_puntos=int(points / users + 0.5) if users else 0,
    )


__all__ = [
    "Period",
    "get_leaderboard",
    "get_leaderboard_for_period",
    "get_summary",
    "get_user_stats",
    "parse_period",
    "rank_users",
]
