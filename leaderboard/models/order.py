"""Model for point orders, the append-only log of adjustments."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat, utcnow
from .user import new_id


class OrderType(str, Enum):
    SUMA = "suma"
    RESTA = "resta"


class Order(SQLModel):
    """One increment or decrement applied to a user."""

    id: str = ORMField(default_factory=new_id)
    usuario_id: str
    codigo_usuario: str
    tipo: OrderType
    fecha: datetime = ORMField(default_factory=utcnow)


def order_to_dict(order: Order) -> Dict[str, Any]:
    return {
        "id": order.id,
        "usuario_id": order.usuario_id,
        "codigo_usuario": order.codigo_usuario,
        "tipo": order.tipo.value,
        "fecha": isoformat(order.fecha),
    }


__all__ = ["Order", "OrderType", "order_to_dict"]
