# mylife_backend/app/services/router_helpers/tag_helpers.py
from __future__ import annotations

import logging
from typing import Any, Dict

from mylife_backend.app.models.tags import TagIn, TagRecord
from mylife_backend.app.services.data_stores import (
    Database,
    Record,
    find_tags_by_id,
    find_tags_by_name,
    list_tags,
    new_id,
)
from mylife_backend.app.services.errors import InvalidReferenceError, RecordNotFoundError
from mylife_backend.app.services.validation.field_validator import validate_fields
from mylife_backend.app.services.validation.integrity import guard_tag_delete, guard_tag_update
from mylife_backend.app.services.validation.references import run_lookups
from mylife_backend.app.services.validation.uniqueness import (
    collect,
    require_single_target,
    unique_on_create,
    unique_on_update,
)
from mylife_backend.app.utils.clock import now_iso
from mylife_backend.app.utils.strings import trim_strings
from .responses import logged_pipeline, ok

log = logging.getLogger("mylife.tags")

def _stored(doc: Dict[str, Any]) -> Record:
    return TagRecord.model_validate(doc).model_dump(mode="json")

def _conflict(name: str) -> str:
    return f"A tag called '{name}' already exists."

def _not_found(tag_id: str) -> RecordNotFoundError:
    return RecordNotFoundError(f"Could not find a tag with ID '{tag_id}'.", data=tag_id)

# -----------------------------------------------------------------------------
# Reads
# -----------------------------------------------------------------------------
def count_tags(db: Database) -> dict:
    return ok(db.tags.estimated_count())

def read_all_tags(db: Database) -> dict:
    return ok(list_tags(db.tags))

def read_tag(db: Database, tag_id: str) -> dict:
    rec = db.tags.find_one_by_id(tag_id)
    if rec is None:
        raise _not_found(tag_id)
    return ok(rec)

# -----------------------------------------------------------------------------
# Mutations
# -----------------------------------------------------------------------------
def create_tag(db: Database, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "create tag"):
        payload = validate_fields(TagIn, body)
        with db.write_guard():
            found = run_lookups({"duplicates": lambda: find_tags_by_name(db.tags, payload.name)})
            messages = collect([unique_on_create(found["duplicates"], _conflict(payload.name))])
            if messages:
                raise InvalidReferenceError(messages, data=trim_strings(body))
            now = now_iso()
            saved = db.tags.insert(_stored({**payload.model_dump(), "id": new_id(), "createdAt": now, "updatedAt": now}))
    log.info("[tags] created %s (%s)", saved["id"], saved["name"])
    return ok(saved)

def update_tag(db: Database, tag_id: str, body: Dict[str, Any]) -> dict:
    with logged_pipeline(log, "update tag"):
        payload = validate_fields(TagIn, body)
        data = trim_strings(body)
        with db.write_guard():
            found = run_lookups({
                "target": lambda: find_tags_by_id(db.tags, tag_id),
                "duplicates": lambda: find_tags_by_name(db.tags, payload.name),
            })
            existing = require_single_target(found["target"], "tag", tag_id, data=data)
            messages = collect([
                unique_on_update(found["duplicates"], tag_id, _conflict(payload.name), entity="tag", data=data),
            ])
            if messages:
                raise InvalidReferenceError(messages, data=data)
            guard_tag_update(db, tag_id, payload.model_dump(), data=data)
            saved = db.tags.update_and_save(_stored({**existing, **payload.model_dump(), "updatedAt": now_iso()}))
            if saved is None:
                raise _not_found(tag_id)
    log.info("[tags] updated %s", tag_id)
    return ok(saved)

def delete_tag(db: Database, tag_id: str) -> dict:
    with logged_pipeline(log, "delete tag"):
        with db.write_guard():
            if db.tags.find_one_by_id(tag_id) is None:
                raise _not_found(tag_id)
            guard_tag_delete(db, tag_id)
            deleted = db.tags.delete_by_id(tag_id)
            if deleted is None:
                raise _not_found(tag_id)
    log.info("[tags] deleted %s", tag_id)
    return ok(deleted)

__all__ = ["count_tags", "read_all_tags", "read_tag", "create_tag", "update_tag", "delete_tag"]
