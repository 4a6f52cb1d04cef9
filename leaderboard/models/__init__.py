"""Model exports."""

from .order import Order, OrderType, order_to_dict
from .results import PointsResult, RegistrationResult, Summary, UserStats
from .snapshot import (
    SCHEMA_VERSION,
    SNAPSHOT_FIELDS,
    Snapshot,
    StoreConfig,
    empty_snapshot,
    snapshot_to_dict,
)
from .user import User, new_id, user_to_dict

__all__ = [
    "Order",
    "OrderType",
    "PointsResult",
    "RegistrationResult",
    "SCHEMA_VERSION",
    "SNAPSHOT_FIELDS",
    "Snapshot",
    "StoreConfig",
    "Summary",
    "User",
    "UserStats",
    "empty_snapshot",
    "new_id",
    "order_to_dict",
    "snapshot_to_dict",
    "user_to_dict",
]
