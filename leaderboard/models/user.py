"""Model for registered leaderboard users."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat, utcnow


def new_id() -> str:
    return uuid.uuid4().hex


class User(SQLModel):
    """Participant identified by display name and public code."""

    id: str = ORMField(default_factory=new_id)
    nombre: str
    codigo_usuario: str
    puntos: int = ORMField(default=0, ge=0)
    fecha_registro: datetime = ORMField(default_factory=utcnow)
    fecha_actualizacion: datetime = ORMField(default_factory=utcnow)


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user to its stored and API shape."""

    return {
        "id": user.id,
        "nombre": user.nombre,
        "codigo_usuario": user.codigo_usuario,
        "puntos": user.puntos,
        "fecha_registro": isoformat(user.fecha_registro),
        "fecha_actualizacion": isoformat(user.fecha_actualizacion),
    }


__all__ = ["User", "new_id", "user_to_dict"]
