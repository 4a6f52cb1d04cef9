"""Record store backed by a Redis server."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import redis

from .base import RecordStore, StoreError
from .keyvalue import decode_fields, encode_fields, field_keys

log = logging.getLogger(__name__)


class RedisStore(RecordStore):
    """Stores each snapshot field as a JSON string under its own key."""

    name = "redis"

    def __init__(
        self,
        url: str,
        prefix: str = "",
        client: Optional[redis.Redis] = None,
    ) -> None:
        self.url = url
        self.prefix = prefix
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise StoreError("Redis store is not open")
        return self._client

    def open(self) -> None:
        if self._client is None:
            self._client = redis.Redis.from_url(self.url)
            log.info("Connected Redis store client")

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def _read(self) -> Optional[Dict[str, Any]]:
        try:
            values = self.client.mget(field_keys(self.prefix))
        except redis.RedisError as exc:
            raise StoreError("Redis read failed") from exc
        return decode_fields(values)

    def _write(self, document: Dict[str, Any]) -> None:
        try:
            with self.client.pipeline(transaction=True) as pipe:
                for key, value in encode_fields(self.prefix, document):
                    pipe.set(key, value)
                pipe.execute()
        except redis.RedisError as exc:
            raise StoreError("Redis write failed") from exc


__all__ = ["RedisStore"]
