"""Shared helpers for backends that keep one key per snapshot field."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models import SNAPSHOT_FIELDS


def field_keys(prefix: str) -> List[str]:
    return [f"{prefix}{field}" for field in SNAPSHOT_FIELDS]


def decode_fields(values: Sequence[Optional[Any]]) -> Optional[Dict[str, Any]]:
    """Rebuild a document from per-field values; ``None`` when all are absent.

    Missing fields are left out so the document fails validation.
    """

    if all(value is None for value in values):
        return None
    document: Dict[str, Any] = {}
    for field, value in zip(SNAPSHOT_FIELDS, values):
        if value is None:
            continue
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        document[field] = json.loads(value) if isinstance(value, str) else value
    return document


def encode_fields(prefix: str, document: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [
        (key, json.dumps(document[field], ensure_ascii=False))
        for key, field in zip(field_keys(prefix), SNAPSHOT_FIELDS)
    ]


__all__ = ["decode_fields", "encode_fields", "field_keys"]
