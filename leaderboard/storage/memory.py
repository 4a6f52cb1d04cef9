"""Process-local record store, used for development and tests."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .base import RecordStore
from .keyvalue import decode_fields, encode_fields, field_keys


class MemoryStore(RecordStore):
    """Keeps JSON-encoded fields in a dict, like the key-value backends."""

    name = "memory"

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix
        self.data: Dict[str, str] = {}

    def _read(self) -> Optional[Dict[str, Any]]:
        return decode_fields([self.data.get(key) for key in field_keys(self.prefix)])

    def _write(self, document: Dict[str, Any]) -> None:
        self.data.update(encode_fields(self.prefix, document))


__all__ = ["MemoryStore"]
