# mylife_backend/app/services/router_helpers/note_helpers.py
"""
Note controller.

create/update run: field validation (variant picked by `type`) ->
reference + uniqueness lookups, fanned out together -> construction ->
persist. Any stage that fails ends the request; nothing is written.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from mylife_backend.app.models.notes import NoteIn
from mylife_backend.app.services.data_stores import (
    LOOKUP_NAME,
    Database,
    Record,
    find_notes_by_date_title,
    find_notes_by_id,
    find_people_by_identifiers,
    find_tags_by_identifiers,
    list_notes,
)
from mylife_backend.app.services.errors import InvalidReferenceError, RecordNotFoundError
from mylife_backend.app.services.note_variants import NoteVariant, ResolvedRefs, build_note
from mylife_backend.app.services.validation.field_validator import validate_note_fields
from mylife_backend.app.services.validation.references import ReferenceCheck, reference_messages, run_lookups
from mylife_backend.app.services.validation.uniqueness import (
    collect,
    require_single_target,
    unique_on_create,
    unique_on_update,
)
from mylife_backend.app.utils.clock import date_iso
from mylife_backend.app.utils.strings import trim_strings
from .populate import load_indexes, note_view
from .responses import logged_pipeline, ok

log = logging.getLogger("mylife.notes")

def _not_found(note_id: str) -> RecordNotFoundError:
    return RecordNotFoundError(f"Could not find a note with ID '{note_id}'.", data=note_id)

# -----------------------------------------------------------------------------
# Reads
# -----------------------------------------------------------------------------
def count_notes(db: Database) -> dict:
    return ok(db.notes.estimated_count())

def read_all_notes(db: Database) -> dict:
    idx = load_indexes(db)
    return ok([note_view(n, idx["tags"], idx["people"]) for n in list_notes(db.notes)])

def read_note(db: Database, note_id: str) -> dict:
    rec = db.notes.find_one_by_id(note_id)
    if rec is None:
        raise _not_found(note_id)
    idx = load_indexes(db)
    return ok(note_view(rec, idx["tags"], idx["people"]))

# -----------------------------------------------------------------------------
# Reference + uniqueness stage
# -----------------------------------------------------------------------------
def check_note_data(
    db: Database,
    variant: NoteVariant,
    payload: NoteIn,
    data: Any,
    note_id: Optional[str] = None,
) -> Tuple[ResolvedRefs, Optional[Record]]:
    """
    Resolve every reference the payload names and check (date, title)
    uniqueness. All problems found here are reported together.
    """
    date = date_iso(payload.date)
    workout = getattr(payload, "workout", None) if variant.references_workout else None

    lookups = {
        "type": lambda: find_tags_by_identifiers(db.tags, [payload.type], "isType"),
        "tags": lambda: find_tags_by_identifiers(db.tags, payload.tags, "isTag"),
        "people": lambda: find_people_by_identifiers(db.people, payload.people),
        "duplicates": lambda: find_notes_by_date_title(db.notes, date, payload.title),
    }
    if workout is not None:
        lookups["workout"] = lambda: find_tags_by_identifiers(db.tags, [workout], "isWorkout")
    if note_id is not None:
        lookups["target"] = lambda: find_notes_by_id(db.notes, note_id)
    found = run_lookups(lookups)

    existing = None
    conflict_message = f"A note with the following date and title already exists: '{date}', '{payload.title}'."
    if note_id is not None:
        existing = require_single_target(found["target"], "note", note_id, data=data)
        conflict = unique_on_update(found["duplicates"], note_id, conflict_message, entity="note", data=data)
    else:
        conflict = unique_on_create(found["duplicates"], conflict_message)

    checks: List[ReferenceCheck] = [
        ReferenceCheck("type", [payload.type], found["type"]),
        ReferenceCheck("tag(s)", payload.tags, found["tags"], optional=True),
    ]
    workout_check = ReferenceCheck("workout", [workout], found["workout"]) if workout is not None else None
    if workout_check is not None:
        checks.append(workout_check)
    people_check = ReferenceCheck("people", payload.people, found["people"], key=LOOKUP_NAME, optional=True)
    checks.append(people_check)

    messages = reference_messages(checks) + collect([conflict])
    if messages:
        raise InvalidReferenceError(messages, data=data)

    refs = ResolvedRefs(
        type_id=checks[0].ids()[0],
        tag_ids=checks[1].ids(),
        people_ids=people_check.ids(),
        workout_id=workout_check.ids()[0] if workout_check is not None else None,
    )
    return refs, existing

# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------
def create_note(db: Database, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "create note"):
        variant, payload = validate_note_fields(body)
        data = trim_strings(body)
        with db.write_guard():
            refs, _ = check_note_data(db, variant, payload, data)
            saved = db.notes.insert(build_note(variant, payload, refs))
    log.info("[notes] created %s (%s)", saved["id"], variant.kind.value)
    return ok(saved)

def update_note(db: Database, note_id: str, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "update note"):
        variant, payload = validate_note_fields(body)
        data = trim_strings(body)
        with db.write_guard():
            refs, existing = check_note_data(db, variant, payload, data, note_id)
            saved = db.notes.update_and_save(build_note(variant, payload, refs, existing=existing))
            if saved is None:
                raise _not_found(note_id)
    log.info("[notes] updated %s (%s)", note_id, variant.kind.value)
    return ok(saved)

def delete_note(db: Database, note_id: str) -> dict:
    with logged_pipeline(log, "delete note"):
        with db.write_guard():
            deleted = db.notes.delete_by_id(note_id)
            if deleted is None:
                raise _not_found(note_id)
    log.info("[notes] deleted %s", note_id)
    return ok(deleted)

__all__ = [
    "count_notes",
    "read_all_notes",
    "read_note",
    "check_note_data",
    "create_note",
    "update_note",
    "delete_note",
]
