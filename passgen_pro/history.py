# -*- coding: utf-8 -*-
"""
Persistent password history.

Records live as one JSON array under a fixed key of a key-value backend,
newest first, capped at MAX_HISTORY entries. History is a convenience: any
backend failure or corrupt payload degrades to an empty list or a dropped
write and is never raised to the caller.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from PyQt5 import QtCore

from .errors import StorageError

STORAGE_KEY = "password_history"
MAX_HISTORY = 20
# Largest millisecond timestamp a double (and QDateTime) represents exactly.
MAX_TIMESTAMP_MS = 2 ** 53

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryRecord:
    id: str
    password: str
    created_at: int
    strength: str
    length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "password": self.password,
            "createdAt": self.created_at,
            "strength": self.strength,
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "HistoryRecord":
        """
        Raises:
            ValueError if ``data`` is not a well-formed record.
        """
        if not isinstance(data, dict):
            raise ValueError("History entry is not an object.")

        record_id = data.get("id")
        password = data.get("password")
        created_at = data.get("createdAt")
        strength = data.get("strength")
        length = data.get("length")

        if not isinstance(record_id, str) or not isinstance(password, str) or not isinstance(strength, str):
            raise ValueError("History entry has missing or non-string fields.")
        # bool is an int subclass; reject it explicitly
        for value in (created_at, length):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("History entry has missing or non-integer fields.")
        if not 0 <= created_at < MAX_TIMESTAMP_MS:
            raise ValueError("History entry timestamp is out of range.")
        if length < 0:
            raise ValueError("History entry length is negative.")

        return cls(
            id=record_id,
            password=password,
            created_at=created_at,
            strength=strength,
            length=length,
        )


# -------------------------
# Backends
# -------------------------

class MemoryBackend:
    """Dict-backed store, used when nothing needs to outlive the process."""

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class QSettingsBackend:
    """
    Key-value backend over QSettings, the same store that keeps the window's
    preferences. Failures surface as StorageError.
    """

    def __init__(self, settings: QtCore.QSettings) -> None:
        self._settings = settings

    def _sync(self) -> None:
        self._settings.sync()
        if self._settings.status() != QtCore.QSettings.NoError:
            raise StorageError(f"QSettings sync failed (status {int(self._settings.status())}).")

    def get(self, key: str) -> Optional[str]:
        if self._settings.status() != QtCore.QSettings.NoError:
            raise StorageError(f"QSettings unreadable (status {int(self._settings.status())}).")
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Unexpected value type {type(value).__name__} under {key!r}.")
        return value

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()


# -------------------------
# Store
# -------------------------

class HistoryStore:
    """
    Newest-first password history over a key-value backend.

    A backend provides ``get(key) -> Optional[str]``, ``set(key, value)`` and
    ``remove(key)``, and reports failures as StorageError.
    """

    def __init__(
        self,
        backend: Any,
        key: str = STORAGE_KEY,
        max_records: int = MAX_HISTORY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_records < 1:
            raise ValueError("History capacity must be at least 1.")

        self._backend = backend
        self._key = key
        self._max_records = max_records
        self._clock = clock

    @property
    def max_records(self) -> int:
        return self._max_records

    # ---------- RAW I/O ----------

    def _read(self) -> List[HistoryRecord]:
        raw = self._backend.get(self._key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise StorageError("History payload is not valid JSON.") from e
        if not isinstance(data, list):
            raise StorageError("History payload is not a list.")

        records: List[HistoryRecord] = []
        for entry in data:
            try:
                records.append(HistoryRecord.from_dict(entry))
            except ValueError:
                logger.debug("Skipping malformed history entry.", exc_info=True)
        return records

    def _write(self, records: List[HistoryRecord]) -> None:
        self._backend.set(self._key, json.dumps([r.to_dict() for r in records]))

    def _new_id(self, now_ms: int, records: List[HistoryRecord]) -> str:
        taken = {r.id for r in records}
        candidate = str(now_ms)
        suffix = 1
        while candidate in taken:
            candidate = f"{now_ms}-{suffix}"
            suffix += 1
        return candidate

    # ---------- PUBLIC API ----------

    def list(self) -> List[HistoryRecord]:
        try:
            return self._read()
        except StorageError:
            logger.debug("Failed to read history; showing it as empty.", exc_info=True)
            return []

    def save(self, password: str, strength: str, length: int) -> None:
        records = self.list()
        now_ms = int(self._clock() * 1000)

        records.insert(
            0,
            HistoryRecord(
                id=self._new_id(now_ms, records),
                password=password,
                created_at=now_ms,
                strength=strength,
                length=length,
            ),
        )
        del records[self._max_records:]

        try:
            self._write(records)
        except StorageError:
            logger.warning("Failed to save history; entry dropped.", exc_info=True)

    def delete_one(self, record_id: str) -> None:
        records = self.list()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return

        try:
            self._write(remaining)
        except StorageError:
            logger.warning("Failed to delete history entry.", exc_info=True)

    def clear_all(self) -> None:
        try:
            self._backend.remove(self._key)
        except StorageError:
            logger.warning("Failed to clear history.", exc_info=True)
