# mylife_backend/app/services/data_stores/document_store.py
"""
JSON-file document store: one file per collection, records keyed by id.

Filters are plain dicts, matched Mongo-style:
    {"name": "Hiking"}                      exact match (or membership when the
                                            stored field is a list)
    {"name": {"$in": ["a", "b"]}}           set membership
    {"$or": [{"id": x}, {"name": x}]}       any sub-filter matches
Derived fields (e.g. a person's lookup name) are computed per record by a
`derive` callable before matching and are included in the returned records.
"""
from __future__ import annotations

import copy
import logging
import uuid
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from mylife_backend.app.services.errors import StoreError
from .io_utils import atomic_write, dump_json, read_json

log = logging.getLogger("mylife.store")

Record = Dict[str, Any]
Filter = Dict[str, Any]
Derive = Callable[[Record], Dict[str, Any]]
SortSpec = Sequence[Tuple[str, int]]

ASCENDING = 1
DESCENDING = -1

def new_id() -> str:
    return uuid.uuid4().hex

# -----------------------------------------------------------------------------
# Filter matching
# -----------------------------------------------------------------------------
def _match_value(stored: Any, wanted: Any) -> bool:
    if isinstance(wanted, dict) and "$in" in wanted:
        choices = wanted["$in"] or []
        if isinstance(stored, list):
            return any(s in choices for s in stored)
        return stored in choices
    if isinstance(stored, list) and not isinstance(wanted, list):
        return wanted in stored
    return stored == wanted

def matches(record: Record, flt: Optional[Filter]) -> bool:
    if not flt:
        return True
    for key, wanted in flt.items():
        if key == "$or":
            if not any(matches(record, sub) for sub in wanted):
                return False
            continue
        if not _match_value(record.get(key), wanted):
            return False
    return True

def _sort_key(field: str):
    # None sorts first; strings compare case-insensitively
    def key(rec: Record):
        v = rec.get(field)
        if isinstance(v, str):
            v = v.lower()
        return (v is not None, v if v is not None else "")
    return key

def sort_records(records: List[Record], sort: Optional[SortSpec]) -> List[Record]:
    if not sort:
        return records
    out = list(records)
    # stable sort applied from the least to the most significant key
    for field, direction in reversed(list(sort)):
        out.sort(key=_sort_key(field), reverse=direction == DESCENDING)
    return out

# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------
class DocumentStore:
    """
    Thread-safe collection backed by <path> (JSON object {id: record}).
    Every operation re-reads the file so separate store instances pointed at
    the same path observe each other's writes.
    """

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = Path(path)
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"DocumentStore({self.name!r}, {str(self.path)!r})"

    # ---- raw blob IO ----
    @contextmanager
    def _guard(self, op: str) -> Iterator[None]:
        try:
            yield
        except (OSError, ValueError, TypeError) as e:
            log.error("[store] %s.%s failed: %s", self.name, op, e)
            raise StoreError(f"Store error during {self.name}.{op}: {e}", cause=e) from e

    def _read_blob(self) -> Dict[str, Record]:
        raw = read_json(self.path, default={})
        if not isinstance(raw, dict):
            raise ValueError(f"collection file {self.path} must hold a JSON object")
        return raw

    def _write_blob(self, blob: Dict[str, Record]) -> None:
        atomic_write(self.path, dump_json(blob))

    # ---- queries ----
    def find(
        self,
        flt: Optional[Filter] = None,
        *,
        sort: Optional[SortSpec] = None,
        derive: Optional[Derive] = None,
    ) -> List[Record]:
        with self._lock, self._guard("find"):
            rows = []
            for rec in self._read_blob().values():
                if derive is not None:
                    rec = {**rec, **derive(rec)}
                if matches(rec, flt):
                    rows.append(copy.deepcopy(rec))
            return sort_records(rows, sort)

    def find_one_by_id(self, record_id: str) -> Optional[Record]:
        with self._lock, self._guard("find_one_by_id"):
            rec = self._read_blob().get(str(record_id))
            return copy.deepcopy(rec) if rec is not None else None

    def count(self, flt: Optional[Filter] = None) -> int:
        with self._lock, self._guard("count"):
            return sum(1 for rec in self._read_blob().values() if matches(rec, flt))

    def estimated_count(self) -> int:
        with self._lock, self._guard("estimated_count"):
            return len(self._read_blob())

    # ---- writes ----
    def insert(self, record: Record) -> Record:
        with self._lock, self._guard("insert"):
            blob = self._read_blob()
            rec = copy.deepcopy(record)
            rid = str(rec.get("id") or new_id())
            if rid in blob:
                raise ValueError(f"{self.name} id already exists: {rid}")
            rec["id"] = rid
            blob[rid] = rec
            self._write_blob(blob)
            log.debug("[store] %s insert %s", self.name, rid)
            return copy.deepcopy(rec)

    def update_and_save(self, record: Record) -> Optional[Record]:
        """Replace the stored record with the same id. Returns None if absent."""
        with self._lock, self._guard("update_and_save"):
            blob = self._read_blob()
            rid = str(record.get("id") or "")
            if rid not in blob:
                return None
            blob[rid] = copy.deepcopy(record)
            self._write_blob(blob)
            log.debug("[store] %s update %s", self.name, rid)
            return copy.deepcopy(record)

    def delete_by_id(self, record_id: str) -> Optional[Record]:
        with self._lock, self._guard("delete_by_id"):
            blob = self._read_blob()
            rec = blob.pop(str(record_id), None)
            if rec is None:
                return None
            self._write_blob(blob)
            log.debug("[store] %s delete %s", self.name, record_id)
            return rec
