# mylife_backend/app/services/data_stores/notes.py
from __future__ import annotations

from typing import List

from mylife_backend.app.models.notes import NoteKind
from .document_store import DESCENDING, DocumentStore, Record

def find_notes_by_date_title(store: DocumentStore, date: str, title: str) -> List[Record]:
    return store.find({"date": date, "title": title})

def find_notes_by_id(store: DocumentStore, note_id: str) -> List[Record]:
    return store.find({"id": note_id})

def count_notes_typed(store: DocumentStore, tag_id: str) -> int:
    return store.count({"type": tag_id})

def count_notes_tagged(store: DocumentStore, tag_id: str) -> int:
    return store.count({"tags": tag_id})

def count_workouts_of(store: DocumentStore, tag_id: str) -> int:
    # only workout notes carry a `workout` field
    return store.count({"kind": NoteKind.WORKOUT.value, "workout": tag_id})

def list_notes(store: DocumentStore) -> List[Record]:
    return store.find(sort=[("date", DESCENDING)])
