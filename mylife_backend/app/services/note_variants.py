# mylife_backend/app/services/note_variants.py
"""
Variant registry and note construction.

VARIANTS maps each NoteKind to its request model and the function that
copies its variant-only fields. `build_note` fills the shared envelope the
same way for every kind, then hands off to the variant's copier.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type

from mylife_backend.app.models.notes import (
    NOTE_RECORD,
    BikeRideNoteIn,
    BookNoteIn,
    HealthNoteIn,
    HikeNoteIn,
    LifeNoteIn,
    NoteIn,
    NoteKind,
    WorkoutNoteIn,
)
from mylife_backend.app.services.data_stores import Record, new_id
from mylife_backend.app.utils.clock import date_iso, now_iso

@dataclass(frozen=True)
class ResolvedRefs:
    """Store ids for every reference a validated note payload named."""
    type_id: str
    tag_ids: List[str] = field(default_factory=list)
    people_ids: List[str] = field(default_factory=list)
    workout_id: Optional[str] = None

FieldCopier = Callable[[Any, ResolvedRefs], Dict[str, Any]]

def _dump_metrics(metrics: Optional[List[Any]]) -> List[Dict[str, Any]]:
    return [m.model_dump(mode="json", exclude_none=True) for m in (metrics or [])]

def _no_fields(payload: NoteIn, refs: ResolvedRefs) -> Dict[str, Any]:
    return {}

def _bike_ride_fields(payload: BikeRideNoteIn, refs: ResolvedRefs) -> Dict[str, Any]:
    return {"bike": payload.bike, "metrics": _dump_metrics(payload.metrics)}

def _hike_fields(payload: HikeNoteIn, refs: ResolvedRefs) -> Dict[str, Any]:
    return {"metrics": _dump_metrics(payload.metrics)}

def _book_fields(payload: BookNoteIn, refs: ResolvedRefs) -> Dict[str, Any]:
    return {
        "authors": list(payload.authors),
        "format": payload.format,
        "status": payload.status,
        "rating": payload.rating,
    }

def _workout_fields(payload: WorkoutNoteIn, refs: ResolvedRefs) -> Dict[str, Any]:
    if refs.workout_id is None:
        raise ValueError("workout notes need a resolved workout tag")
    return {"workout": refs.workout_id, "metrics": _dump_metrics(payload.metrics)}

@dataclass(frozen=True)
class NoteVariant:
    kind: NoteKind
    request_model: Type[NoteIn]
    copy_fields: FieldCopier

    @property
    def references_workout(self) -> bool:
        return self.kind is NoteKind.WORKOUT

VARIANTS: Dict[NoteKind, NoteVariant] = {
    v.kind: v
    for v in (
        NoteVariant(NoteKind.BIKE_RIDE, BikeRideNoteIn, _bike_ride_fields),
        NoteVariant(NoteKind.BOOK, BookNoteIn, _book_fields),
        NoteVariant(NoteKind.HEALTH, HealthNoteIn, _no_fields),
        NoteVariant(NoteKind.HIKE, HikeNoteIn, _hike_fields),
        NoteVariant(NoteKind.LIFE, LifeNoteIn, _no_fields),
        NoteVariant(NoteKind.WORKOUT, WorkoutNoteIn, _workout_fields),
    )
}

def variant_for(type_name: str) -> Optional[NoteVariant]:
    """The variant a type name selects, or None for an unknown name."""
    try:
        return VARIANTS[NoteKind(type_name)]
    except ValueError:
        return None

def build_note(
    variant: NoteVariant,
    payload: NoteIn,
    refs: ResolvedRefs,
    *,
    existing: Optional[Record] = None,
) -> Record:
    """
    Construct the stored form of a validated note. With `existing`, the
    result keeps its id and createdAt and gets a fresh updatedAt; the kind
    may change.
    """
    now = now_iso()
    doc: Dict[str, Any] = {
        "id": existing["id"] if existing else new_id(),
        "kind": variant.kind,
        "type": refs.type_id,
        "tags": list(refs.tag_ids),
        "date": date_iso(payload.date),
        "title": payload.title,
        "description": payload.description,
        "people": list(refs.people_ids),
        "place": payload.place,
        "photoAlbum": payload.photoAlbum,
        "createdAt": existing.get("createdAt", now) if existing else now,
        "updatedAt": now,
    }
    doc.update(variant.copy_fields(payload, refs))
    # round-trip through the union so the stored shape always matches its kind
    return NOTE_RECORD.dump_python(NOTE_RECORD.validate_python(doc), mode="json")

__all__ = ["ResolvedRefs", "NoteVariant", "VARIANTS", "variant_for", "build_note"]
