"""Record store contract shared by every backend."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.time import utcnow
from ..models import Snapshot, empty_snapshot, snapshot_to_dict

log = logging.getLogger(__name__)


class StoreError(Exception):
    """The backing medium could not be read or written."""


class RecordStore(ABC):
    """Load-everything / save-everything persistence for a snapshot.

    Every operation reads the full snapshot, mutates it in memory and writes
    it back. There is no locking: concurrent writers race and the last one
    wins.
    """

    name = "base"

    def open(self) -> None:
        """Acquire connections or prepare the medium."""

    def close(self) -> None:
        """Release whatever ``open`` acquired."""

    def __enter__(self) -> "RecordStore":
        self.open()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @abstractmethod
    def _read(self) -> Optional[Dict[str, Any]]:
        """Return the raw stored document, or ``None`` when nothing is stored.

        Undecodable data raises ``ValueError``; I/O failures raise
        ``StoreError``.
        """

    @abstractmethod
    def _write(self, document: Dict[str, Any]) -> None:
        """Persist the full document, raising ``StoreError`` on failure."""

    def load(self) -> Snapshot:
        try:
            raw = self._read()
            if raw is None:
                snapshot = empty_snapshot()
                log.info("No stored data in %s store, initialising", self.name)
                self.save(snapshot)
                return snapshot
            return Snapshot.model_validate(raw)
        except ValueError as exc:
            log.warning("Invalid data in %s store, reinitialising: %s", self.name, exc)
            return empty_snapshot()

    def save(self, snapshot: Snapshot) -> bool:
        snapshot.configuracion.ultima_actualizacion = utcnow()
        try:
            self._write(snapshot_to_dict(snapshot))
        except StoreError:
            log.exception("Failed to save snapshot to %s store", self.name)
            return False
        return True


__all__ = ["RecordStore", "StoreError"]
