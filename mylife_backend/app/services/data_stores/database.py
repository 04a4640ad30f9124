# mylife_backend/app/services/data_stores/database.py
from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock, RLock
from typing import ContextManager, Dict

from mylife_backend.app.config import (
    NOTES_FILE,
    PEOPLE_FILE,
    TAGS_FILE,
    get_data_dir,
    serialize_writes,
)
from .document_store import DocumentStore

@dataclass
class Database:
    """The three collections the record API works on."""
    root: Path
    tags: DocumentStore
    people: DocumentStore
    notes: DocumentStore
    serialize_writes: bool = False
    _write_lock: RLock = field(default_factory=RLock, repr=False)

    def write_guard(self) -> ContextManager[None]:
        """
        Wraps a whole check-then-write pipeline. A no-op unless write
        serialization is enabled.
        """
        if not self.serialize_writes:
            return nullcontext()
        return self._write_lock

def open_database(root: Path, *, serialize: bool | None = None) -> Database:
    root = Path(root).resolve()
    root.mkdir(parents=True, exist_ok=True)
    return Database(
        root=root,
        tags=DocumentStore("tags", root / TAGS_FILE),
        people=DocumentStore("people", root / PEOPLE_FILE),
        notes=DocumentStore("notes", root / NOTES_FILE),
        serialize_writes=serialize_writes() if serialize is None else serialize,
    )

# One Database per data dir so the write lock is shared by every request.
_DATABASES: Dict[Path, Database] = {}
_DATABASES_LOCK = Lock()

def get_database() -> Database:
    """FastAPI dependency: the database under the current DATA_DIR."""
    root = get_data_dir()
    with _DATABASES_LOCK:
        db = _DATABASES.get(root)
        if db is None:
            db = open_database(root)
            _DATABASES[root] = db
        return db
