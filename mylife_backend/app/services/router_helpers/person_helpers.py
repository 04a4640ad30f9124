# mylife_backend/app/services/router_helpers/person_helpers.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mylife_backend.app.models.people import PersonIn, PersonRecord
from mylife_backend.app.services.data_stores import (
    Database,
    Record,
    find_people_by_id,
    find_people_by_natural_key,
    find_tags_by_identifiers,
    list_people,
    new_id,
)
from mylife_backend.app.services.errors import InvalidReferenceError, RecordNotFoundError
from mylife_backend.app.services.validation.field_validator import validate_fields
from mylife_backend.app.services.validation.references import ReferenceCheck, reference_messages, run_lookups
from mylife_backend.app.services.validation.uniqueness import (
    collect,
    require_single_target,
    unique_on_create,
    unique_on_update,
)
from mylife_backend.app.utils.clock import date_iso, now_iso, today_iso
from mylife_backend.app.utils.strings import person_lookup_name, quoted_list, trim_strings
from .populate import index_by_id, person_view
from .responses import logged_pipeline, ok

log = logging.getLogger("mylife.people")

def _not_found(person_id: str) -> RecordNotFoundError:
    return RecordNotFoundError(f"Could not find a person with ID '{person_id}'.", data=person_id)

def _natural_key(payload: PersonIn) -> tuple:
    # absent middle/last names are stored as "" so the key always matches
    return payload.firstName, payload.middleName or "", payload.lastName or ""

def build_person(payload: PersonIn, tag_ids: List[str], existing: Optional[Record] = None) -> Record:
    now = now_iso()
    first, middle, last = _natural_key(payload)
    doc = {
        "id": existing["id"] if existing else new_id(),
        "firstName": first,
        "middleName": middle,
        "lastName": last,
        "preferredName": payload.preferredName or "",
        "birthdate": date_iso(payload.birthdate),
        "googlePhotoUrl": payload.googlePhotoUrl,
        "picasaContactId": payload.picasaContactId,
        "tags": list(tag_ids),
        "notes": [{"date": date_iso(n.date) or today_iso(), "note": n.note} for n in payload.notes],
        "photos": [p.model_dump() for p in payload.photos],
        "createdAt": existing.get("createdAt", now) if existing else now,
        "updatedAt": now,
    }
    return PersonRecord.model_validate(doc).model_dump(mode="json")

# -----------------------------------------------------------------------------
# Reads
# -----------------------------------------------------------------------------
def count_people(db: Database) -> dict:
    return ok(db.people.estimated_count())

def read_all_people(db: Database) -> dict:
    tags = index_by_id(db.tags.find())
    return ok([person_view(p, tags) for p in list_people(db.people)])

def read_person(db: Database, person_id: str) -> dict:
    rec = db.people.find_one_by_id(person_id)
    if rec is None:
        raise _not_found(person_id)
    return ok(person_view(rec, index_by_id(db.tags.find())))

# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------
def _check_data(db: Database, payload: PersonIn, data: Any, person_id: Optional[str] = None):
    """Reference + uniqueness stage. Returns (resolved tag ids, existing record or None)."""
    first, middle, last = _natural_key(payload)
    lookups = {
        "tags": lambda: find_tags_by_identifiers(db.tags, payload.tags, "isPerson"),
        "duplicates": lambda: find_people_by_natural_key(db.people, first, middle, last),
    }
    if person_id is not None:
        lookups["target"] = lambda: find_people_by_id(db.people, person_id)
    found = run_lookups(lookups)

    existing = None
    if person_id is not None:
        existing = require_single_target(found["target"], "person", person_id, data=data)
        conflict = unique_on_update(
            found["duplicates"],
            person_id,
            f"A person called '{person_lookup_name(first, middle, last)}' already exists.",
            entity="person",
            data=data,
        )
    else:
        conflict = unique_on_create(
            found["duplicates"],
            f"A person with following first, middle and last names already exist: {quoted_list([first, middle, last])}.",
        )

    tags = ReferenceCheck("tag(s)", payload.tags, found["tags"])
    messages = reference_messages([tags]) + collect([conflict])
    if messages:
        raise InvalidReferenceError(messages, data=data)
    return tags.ids(), existing

def create_person(db: Database, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "create person"):
        payload = validate_fields(PersonIn, body)
        data = trim_strings(body)
        with db.write_guard():
            tag_ids, _ = _check_data(db, payload, data)
            saved = db.people.insert(build_person(payload, tag_ids))
    log.info("[people] created %s", saved["id"])
    return ok(saved)

def update_person(db: Database, person_id: str, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "update person"):
        payload = validate_fields(PersonIn, body)
        data = trim_strings(body)
        with db.write_guard():
            tag_ids, existing = _check_data(db, payload, data, person_id)
            saved = db.people.update_and_save(build_person(payload, tag_ids, existing))
            if saved is None:
                raise _not_found(person_id)
    log.info("[people] updated %s", person_id)
    return ok(saved)

def delete_person(db: Database, person_id: str) -> dict:
    # notes may still name this person; reads drop ids that no longer resolve
    with logged_pipeline(log, "delete person"):
        with db.write_guard():
            deleted = db.people.delete_by_id(person_id)
            if deleted is None:
                raise _not_found(person_id)
    log.info("[people] deleted %s", person_id)
    return ok(deleted)

__all__ = [
    "build_person",
    "count_people",
    "read_all_people",
    "read_person",
    "create_person",
    "update_person",
    "delete_person",
]
