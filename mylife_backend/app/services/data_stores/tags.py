# mylife_backend/app/services/data_stores/tags.py
from __future__ import annotations

from typing import List, Optional, Sequence

from .document_store import ASCENDING, DocumentStore, Record

# Capability flags a tag can carry, in display order.
TAG_FLAGS = ("isType", "isTag", "isWorkout", "isPerson")

def identifier_filter(identifiers: Sequence[str], key: str = "name") -> dict:
    """Records whose `key` or id is one of the client identifiers."""
    ids = list(identifiers)
    return {"$or": [{key: {"$in": ids}}, {"id": {"$in": ids}}]}

def find_tags_by_identifiers(store: DocumentStore, identifiers: Optional[Sequence[str]], flag: str) -> Optional[List[Record]]:
    """
    Tags named (or id'd) in `identifiers` that also carry `flag`.
    None in, None out: an absent client list has no master list.
    """
    if identifiers is None:
        return None
    if flag not in TAG_FLAGS:
        raise ValueError(f"unknown tag flag: {flag}")
    flt = identifier_filter(identifiers)
    flt[flag] = True
    return store.find(flt)

def find_tags_by_name(store: DocumentStore, name: str) -> List[Record]:
    return store.find({"name": name})

def find_tags_by_id(store: DocumentStore, tag_id: str) -> List[Record]:
    return store.find({"id": tag_id})

def list_tags(store: DocumentStore) -> List[Record]:
    return store.find(sort=[("name", ASCENDING)])
