"""Record store backed by a single local JSON document."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .base import RecordStore, StoreError


class JsonFileStore(RecordStore):
    """Writes go to a sibling temp file that replaces the document atomically,
    so readers never see a truncated file."""

    name = "json"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def open(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot create data directory {self.path.parent}") from exc

    def _read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Cannot read {self.path}") from exc
        return json.loads(content)

    def _write(self, document: Dict[str, Any]) -> None:
        content = json.dumps(document, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Cannot write {self.path}") from exc


__all__ = ["JsonFileStore"]
