"""Full in-memory copy of the persisted collections."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat, utcnow
from .order import Order, order_to_dict
from .user import User, user_to_dict

SCHEMA_VERSION = "2.0"

# Top-level document keys; key-value backends store one key per field.
SNAPSHOT_FIELDS = ("usuarios", "ordenes", "configuracion")


class StoreConfig(SQLModel):
    """Schema version and write stamps of a snapshot."""

    version: str = SCHEMA_VERSION
    creado: datetime = ORMField(default_factory=utcnow)
    ultima_actualizacion: datetime = ORMField(default_factory=utcnow)


class Snapshot(SQLModel):
    """Users, orders and configuration loaded for one operation.

    The three fields are required so that a stored document missing any of
    them fails validation and is treated as invalid.
    """

    usuarios: List[User]
    ordenes: List[Order]
    configuracion: StoreConfig


def empty_snapshot() -> Snapshot:
    now = utcnow()
    return Snapshot(
        usuarios=[],
        ordenes=[],
        configuracion=StoreConfig(creado=now, ultima_actualizacion=now),
    )


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Serialise a snapshot to the persisted document layout."""

    config = snapshot.configuracion
    return {
        "usuarios": [user_to_dict(user) for user in snapshot.usuarios],
        "ordenes": [order_to_dict(order) for order in snapshot.ordenes],
        "configuracion": {
            "version": config.version,
            "creado": isoformat(config.creado),
            "ultima_actualizacion": isoformat(config.ultima_actualizacion),
        },
    }


__all__ = [
    "SCHEMA_VERSION",
    "SNAPSHOT_FIELDS",
    "Snapshot",
    "StoreConfig",
    "empty_snapshot",
    "snapshot_to_dict",
]
