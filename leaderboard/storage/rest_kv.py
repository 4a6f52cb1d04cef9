"""Record store backed by a managed key-value service over REST.

Speaks the Upstash / Vercel KV REST protocol: a Redis command is posted as a
JSON array and the reply comes back as ``{"result": ...}`` or
``{"error": ...}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .base import RecordStore, StoreError
from .keyvalue import decode_fields, encode_fields, field_keys

log = logging.getLogger(__name__)


class RestKVStore(RecordStore):
    name = "kv"

    def __init__(
        self,
        url: str,
        token: str,
        prefix: str = "",
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not url or not token:
            raise RuntimeError("KV_REST_API_URL and KV_REST_API_TOKEN are required for the kv store")
        self.url = url.rstrip("/")
        self.token = token
        self.prefix = prefix
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            raise StoreError("KV store is not open")
        return self._client

    def open(self) -> None:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.url,
                headers={"Authorization": f"Bearer {self.token}"},
                timeout=self.timeout,
                transport=self._transport,
            )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _post(self, path: str, payload: List[Any]) -> Any:
        try:
            response = self.client.post(path, json=payload)
        except httpx.HTTPError as exc:
            raise StoreError(f"KV request to {path} failed") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise StoreError(f"KV returned a non-JSON reply ({response.status_code})") from exc
        if response.status_code >= 400 or (isinstance(body, dict) and "error" in body):
            error = body.get("error") if isinstance(body, dict) else body
            raise StoreError(f"KV error ({response.status_code}): {error}")
        return body

    def _read(self) -> Optional[Dict[str, Any]]:
        body = self._post("/", ["MGET", *field_keys(self.prefix)])
        return decode_fields(body.get("result") or [])

    def _write(self, document: Dict[str, Any]) -> None:
        commands = [["SET", key, value] for key, value in encode_fields(self.prefix, document)]
        replies = self._post("/multi-exec", commands)
        for reply in replies:
            if isinstance(reply, dict) and "error" in reply:
                raise StoreError(f"KV transaction failed: {reply['error']}")


__all__ = ["RestKVStore"]
