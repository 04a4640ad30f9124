# mylife_backend/app/services/data_stores/people.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from mylife_backend.app.utils.strings import person_lookup_name
from .document_store import ASCENDING, DocumentStore, Record
from .tags import identifier_filter

LOOKUP_NAME = "lookupName"

def derive_lookup_name(rec: Record) -> Dict[str, Any]:
    return {LOOKUP_NAME: person_lookup_name(rec.get("firstName"), rec.get("middleName"), rec.get("lastName"))}

def find_people_by_identifiers(store: DocumentStore, identifiers: Optional[Sequence[str]]) -> Optional[List[Record]]:
    """
    People whose lookup name (or id) is in `identifiers`. Returned records
    carry the derived lookupName so callers can report missing names.
    """
    if identifiers is None:
        return None
    return store.find(identifier_filter(identifiers, key=LOOKUP_NAME), derive=derive_lookup_name)

def find_people_by_natural_key(store: DocumentStore, first: str, middle: str, last: str) -> List[Record]:
    return store.find({"firstName": first, "middleName": middle, "lastName": last})

def find_people_by_id(store: DocumentStore, person_id: str) -> List[Record]:
    return store.find({"id": person_id})

def count_people_tagged(store: DocumentStore, tag_id: str) -> int:
    return store.count({"tags": tag_id})

def list_people(store: DocumentStore) -> List[Record]:
    return store.find(sort=[("firstName", ASCENDING), ("lastName", ASCENDING)])
