# mylife_backend/app/services/validation/integrity.py
"""
Referential integrity for tags.

A tag can be referenced from four places. Each place maps to the capability
flag that makes the reference legal:

    notes.type      isType
    notes.tags      isTag
    notes.workout   isWorkout
    people.tags     isPerson

Deleting a tag needs all four counts at zero. Clearing a flag needs only
that flag's count at zero; setting flags is always allowed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Tuple

from mylife_backend.app.services.data_stores import (
    Database,
    count_notes_tagged,
    count_notes_typed,
    count_people_tagged,
    count_workouts_of,
)
from mylife_backend.app.services.errors import ReferentialIntegrityError
from .references import run_lookups

log = logging.getLogger("mylife.validation")

@dataclass(frozen=True)
class TagReferenceCounts:
    noteTypes: int = 0
    noteTags: int = 0
    noteWorkouts: int = 0
    peopleTags: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

# count field -> (guarding flag, label used in messages)
REFERENCE_CATEGORIES: Dict[str, Tuple[str, str]] = {
    "noteTypes": ("isType", "notes.type"),
    "noteTags": ("isTag", "notes.tags"),
    "noteWorkouts": ("isWorkout", "notes.workout"),
    "peopleTags": ("isPerson", "people.tags"),
}

def count_tag_references(db: Database, tag_id: str) -> TagReferenceCounts:
    """The four reference counts for `tag_id`, queried concurrently."""
    found = run_lookups({
        "noteTypes": lambda: count_notes_typed(db.notes, tag_id),
        "noteTags": lambda: count_notes_tagged(db.notes, tag_id),
        "noteWorkouts": lambda: count_workouts_of(db.notes, tag_id),
        "peopleTags": lambda: count_people_tagged(db.people, tag_id),
    })
    return TagReferenceCounts(**found)

def _listing(counts: TagReferenceCounts, categories: List[str]) -> str:
    return ", ".join(f"{getattr(counts, c)} {REFERENCE_CATEGORIES[c][1]}" for c in categories)

def _message(action: str, tag_id: str, counts: TagReferenceCounts, categories: List[str]) -> str:
    return (
        f"Cannot {action} tag with ID '{tag_id}' without breaking referential integrity.  "
        f"The tag is referenced in: {_listing(counts, categories)} field(s)."
    )

def blocked_for_delete(counts: TagReferenceCounts) -> List[str]:
    return [c for c in REFERENCE_CATEGORIES if getattr(counts, c) > 0]

def blocked_for_update(counts: TagReferenceCounts, flags: Mapping[str, Any]) -> List[str]:
    """Categories whose flag `flags` turns off while references remain."""
    return [
        c for c, (flag, _) in REFERENCE_CATEGORIES.items()
        if flags.get(flag) is False and getattr(counts, c) > 0
    ]

def guard_tag_delete(db: Database, tag_id: str) -> TagReferenceCounts:
    counts = count_tag_references(db, tag_id)
    blocked = blocked_for_delete(counts)
    if blocked:
        log.info("[integrity] delete of tag %s blocked: %s", tag_id, counts)
        raise ReferentialIntegrityError(_message("delete", tag_id, counts, blocked), data=tag_id)
    return counts

def guard_tag_update(db: Database, tag_id: str, flags: Mapping[str, Any], *, data: Any = None) -> None:
    """No-op unless `flags` clears at least one capability flag."""
    if not any(flags.get(flag) is False for flag, _ in REFERENCE_CATEGORIES.values()):
        return
    counts = count_tag_references(db, tag_id)
    blocked = blocked_for_update(counts, flags)
    if blocked:
        log.info("[integrity] update of tag %s blocked: %s", tag_id, counts)
        raise ReferentialIntegrityError(_message("update", tag_id, counts, blocked), data=data)

__all__ = [
    "TagReferenceCounts",
    "REFERENCE_CATEGORIES",
    "count_tag_references",
    "blocked_for_delete",
    "blocked_for_update",
    "guard_tag_delete",
    "guard_tag_update",
]
