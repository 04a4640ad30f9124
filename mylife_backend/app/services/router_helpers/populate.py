# mylife_backend/app/services/router_helpers/populate.py
"""
Expanded (populated) read views.

Notes and people store reference ids; reads replace them with the
referenced records. Ids that no longer resolve are dropped from lists and
become None for single references.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from mylife_backend.app.services.data_stores import Database, Record
from mylife_backend.app.utils.strings import person_display_name

Index = Dict[str, Record]

def index_by_id(records: Iterable[Record]) -> Index:
    return {r["id"]: r for r in records}

def _pick(index: Index, ids: Optional[List[str]]) -> List[Record]:
    return [index[i] for i in ids or [] if i in index]

def person_name(rec: Record) -> str:
    return person_display_name(
        rec.get("firstName"), rec.get("preferredName"), rec.get("middleName"), rec.get("lastName")
    )

def person_view(rec: Record, tags: Index) -> Record:
    out = dict(rec)
    out["name"] = person_name(rec)
    out["tags"] = _pick(tags, rec.get("tags"))
    return out

def person_summary(rec: Record) -> Record:
    # people inside a note keep their own tags as ids
    out = dict(rec)
    out["name"] = person_name(rec)
    return out

def note_view(rec: Record, tags: Index, people: Index) -> Record:
    out: Dict[str, Any] = dict(rec)
    out["type"] = tags.get(rec.get("type"))
    out["tags"] = _pick(tags, rec.get("tags"))
    out["people"] = [person_summary(p) for p in _pick(people, rec.get("people"))]
    if "workout" in rec:
        out["workout"] = tags.get(rec.get("workout"))
    return out

def load_indexes(db: Database, *, people: bool = True) -> Dict[str, Index]:
    out = {"tags": index_by_id(db.tags.find())}
    if people:
        out["people"] = index_by_id(db.people.find())
    return out
