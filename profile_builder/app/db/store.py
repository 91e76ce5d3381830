"""
In-memory keyed store for one entity kind.

Ids start at 1 and are never reused, even after delete. Records are frozen pydantic
models; update builds a new record from the stored one plus the partial changes.
list_by_profile is a linear scan, O(n) per kind.
"""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Any, Generic, Iterable, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(Generic[RecordT]):
    """Keyed storage and id assignment for one record type."""

    def __init__(
        self,
        model: type[RecordT],
        stamp_on_create: Iterable[str] = (),
        stamp_on_update: Iterable[str] = (),
    ) -> None:
        self.model = model
        self._stamp_on_create = tuple(stamp_on_create)
        self._stamp_on_update = tuple(stamp_on_update)
        self._records: dict[int, RecordT] = {}
        self._next_id = 1
        # Serializes id assignment and read-merge-write; handlers run in a threadpool.
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> RecordT | None:
        return self._records.get(record_id)

    def list_by_profile(self, profile_id: int) -> list[RecordT]:
        """Records whose profileId matches. Insertion order, not contractual."""
        return [r for r in list(self._records.values()) if getattr(r, "profileId", None) == profile_id]

    def create(self, data: dict[str, Any]) -> RecordT:
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            now = utcnow()
            stamps = {name: now for name in self._stamp_on_create}
            record = self.model.model_validate({**data, **stamps, "id": record_id})
            self._records[record_id] = record
        return record

    def update(self, record_id: int, changes: dict[str, Any]) -> RecordT | None:
        """Shallow-merge changes onto the stored record. None when id is absent."""
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            now = utcnow()
            stamps = {name: now for name in self._stamp_on_update}
            merged = {**existing.model_dump(), **changes, **stamps, "id": record_id}
            record = self.model.model_validate(merged)
            self._records[record_id] = record
        return record

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None
