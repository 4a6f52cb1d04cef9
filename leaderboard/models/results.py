"""Result values returned by the domain operations."""

from __future__ import annotations

from typing import Optional

from sqlmodel import SQLModel


class RegistrationResult(SQLModel):
    success: bool
    message: str
    codigo_usuario: Optional[str] = None


class PointsResult(SQLModel):
    success: bool
    message: str
    puntos: Optional[int] = None


class UserStats(SQLModel):
    """Per-user counters; the period fields mirror the lifetime total."""

    nombre: str
    puntos: int
    ordenes_hoy: int
    ordenes_semana: int
    ordenes_mes: int
    ordenes_total: int


class Summary(SQLModel):
    total_usuarios: int
    total_puntos: int
    total_ordenes: int
    promedio_puntos: int


__all__ = ["PointsResult", "RegistrationResult", "Summary", "UserStats"]
