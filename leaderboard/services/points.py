"""Point adjustments through a user's public code."""

from __future__ import annotations

import logging

from ..core.time import utcnow
from ..models import Order, OrderType, PointsResult
from ..storage import RecordStore, StoreError
from .users import INTERNAL_ERROR

log = logging.getLogger(__name__)

USER_NOT_FOUND = "Usuario no encontrado"
SAVE_CHANGES_FAILED = "Error al guardar los cambios"
INVALID_OPERATION = 'Operación debe ser "suma" o "resta"'


def adjust_points(store: RecordStore, code: str, operation: OrderType | str) -> PointsResult:
    """Add or remove one point and append the matching order.

    Removing a point at zero leaves the total unchanged but still records the
    order and reports success. The load/save cycle is not atomic: concurrent
    adjustments of the same user can overwrite each other.
    """

    try:
        operation = OrderType(operation)
    except (TypeError, ValueError):
        return PointsResult(success=False, message=INVALID_OPERATION)

    try:
        snapshot = store.load()
    except StoreError:
        log.exception("Could not load store to adjust points of %s", code)
        return PointsResult(success=False, message=INTERNAL_ERROR)

    user = next((u for u in snapshot.usuarios if u.codigo_usuario == code), None)
    if user is None:
        return PointsResult(success=False, message=USER_NOT_FOUND)

    if operation is OrderType.SUMA:
        user.puntos += 1
    elif user.puntos > 0:
        user.puntos -= 1

    now = utcnow()
    user.fecha_actualizacion = now
    snapshot.ordenes.append(
        Order(usuario_id=user.id, codigo_usuario=code, tipo=operation, fecha=now)
    )

    if not store.save(snapshot):
        return PointsResult(success=False, message=SAVE_CHANGES_FAILED)

    verb = "sumados" if operation is OrderType.SUMA else "restados"
    log.info("Points %s for %s, total %d", verb, code, user.puntos)
    return PointsResult(success=True, message=f"Puntos {verb} correctamente", puntos=user.puntos)


__all__ = ["INVALID_OPERATION", "SAVE_CHANGES_FAILED", "USER_NOT_FOUND", "adjust_points"]
