# mylife_backend/app/models/notes.py
"""
Note request models (one per variant) and the stored note union.

Every variant shares the NoteIn envelope. Stored notes carry `kind`, the
variant name, which discriminates the NoteRecord union; `type` holds the
resolved type-tag id.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated

from mylife_backend.app.rules.loader import get_record_rules, one_of_message
from .common import IsoDate, IsoDateTime, RequestModel, is_scalar, no_duplicates, one_of

_RULES = get_record_rules()

class NoteKind(str, Enum):
    BIKE_RIDE = "Bike Ride"
    BOOK = "Book"
    HEALTH = "Health"
    HIKE = "Hike"
    LIFE = "Life"
    WORKOUT = "Workout"

# =============================================================================
# Request models
# =============================================================================

class NoteIn(RequestModel):
    # field order matters: `tags` checks against the already-validated `type`
    type: Annotated[str, StringConstraints(min_length=1)]
    tags: Annotated[List[str], AfterValidator(no_duplicates("Duplicate tags are not allowed."))]
    date: IsoDate
    title: Annotated[str, StringConstraints(min_length=1, max_length=_RULES.note.title_max_length)]
    description: Optional[str] = None
    people: Annotated[List[str], AfterValidator(no_duplicates("Duplicate names are not allowed."))]
    place: str                           # required, may be ""
    photoAlbum: Optional[str] = None

    messages: ClassVar[Dict[str, str]] = {
        "type": "Type is required.",
        "tags": "Tags must be specified in an array; an empty array is okay.",
        "tags.*": "Each tag must be a name or ID.",
        "date": "Date must be a valid date.",
        "title": f"A title between 1 and {_RULES.note.title_max_length} characters long is required.",
        "description": "Description must be text if it is specified at all.",
        "people": "People must be specified in an array.",
        "people.*": "Each person must be a name or ID.",
        "place": "Place is required but it can be an empty string.",
        "photoAlbum": "Photo album must be text if it is specified at all.",
    }

    @field_validator("tags")
    @classmethod
    def _type_not_in_tags(cls, tags: List[str], info: ValidationInfo) -> List[str]:
        note_type = info.data.get("type")
        if note_type and note_type in tags:
            raise ValueError("The same tag cannot be specified in both the type and tags fields.")
        return tags

class LifeNoteIn(NoteIn):
    pass

class HealthNoteIn(NoteIn):
    pass

# ---- track metrics (bike rides and hikes) ----

_TRACK_MESSAGES: Dict[str, str] = {
    "metrics": "Metrics must be specified in an array if it is specified at all.",
    "metrics.*": "Each metric set must be an object.",
    "metrics.*.startDate": "Start date must be a valid ISO 8601 date/time.",
    "metrics.*.movingTime": "Moving time must be an integer greater than or equal to 0 s.",
    "metrics.*.totalTime": "Total time must be an integer greater than or equal to 0 s.",
    "metrics.*.distance": "Distance must be a number greater than or equal to 0 km.",
    "metrics.*.avgSpeed": "Average speed must be greater than or equal to 0 km/h.",
    "metrics.*.maxSpeed": "Maximum speed must be greater than or equal to 0 km/h.",
    "metrics.*.elevationGain": "Elevation gain must be a number in metres.",
    "metrics.*.maxElevation": "Maximum elevation must be a number in metres.",
    "metrics.*.route": "Route must be an object if it is specified at all.",
}

def _not_bool(v: Any) -> Any:
    # pydantic would otherwise read true/false as 1/0
    if isinstance(v, bool):
        raise PydanticCustomError("number_type", "Input should be a number")
    return v

Count = Annotated[int, BeforeValidator(_not_bool), Field(ge=0)]
Amount = Annotated[float, BeforeValidator(_not_bool), Field(ge=0)]
Reading = Annotated[float, BeforeValidator(_not_bool)]

class TrackMetricsIn(RequestModel):
    startDate: Optional[IsoDateTime] = None
    movingTime: Optional[Count] = None
    totalTime: Optional[Count] = None
    distance: Optional[Amount] = None
    avgSpeed: Optional[Amount] = None
    maxSpeed: Optional[Amount] = None
    elevationGain: Optional[Reading] = None
    maxElevation: Optional[Reading] = None
    route: Optional[Dict[str, Any]] = None

class RideMetricsIn(TrackMetricsIn):
    dataSource: Optional[Annotated[str, AfterValidator(one_of(_RULES.bike_ride.data_sources))]] = None

class HikeMetricsIn(TrackMetricsIn):
    dataSource: Optional[Annotated[str, StringConstraints(max_length=_RULES.hike.data_source_max_length)]] = None

_DUP_METRICS = "Duplicate metric sets are not allowed."

class BikeRideNoteIn(NoteIn):
    bike: Annotated[str, AfterValidator(one_of(_RULES.bike_ride.bikes))]
    metrics: Optional[Annotated[List[RideMetricsIn], AfterValidator(no_duplicates(_DUP_METRICS))]] = None

    messages: ClassVar[Dict[str, str]] = {
        **NoteIn.messages,
        **_TRACK_MESSAGES,
        "bike": one_of_message("Bike", _RULES.bike_ride.bikes),
        "metrics.*.dataSource": one_of_message("Data source", _RULES.bike_ride.data_sources),
    }

class HikeNoteIn(NoteIn):
    metrics: Optional[Annotated[List[HikeMetricsIn], AfterValidator(no_duplicates(_DUP_METRICS))]] = None

    messages: ClassVar[Dict[str, str]] = {
        **NoteIn.messages,
        **_TRACK_MESSAGES,
        "metrics.*.dataSource": f"Data source cannot exceed {_RULES.hike.data_source_max_length} characters.",
    }

# ---- book ----

def _has_author(authors: List[str]) -> List[str]:
    if not authors:
        raise ValueError("At least one author is required.")
    return authors

Author = Annotated[str, StringConstraints(min_length=1, max_length=_RULES.book.author_max_length)]

class BookNoteIn(NoteIn):
    authors: Annotated[
        List[Author],
        AfterValidator(_has_author),
        AfterValidator(no_duplicates("Duplicate authors are not allowed.")),
    ]
    format: Optional[Annotated[str, AfterValidator(one_of(_RULES.book.formats))]] = None
    status: Annotated[str, AfterValidator(one_of(_RULES.book.statuses))]
    rating: Optional[Annotated[int, BeforeValidator(_not_bool), Field(ge=_RULES.book.rating_min, le=_RULES.book.rating_max)]] = None

    messages: ClassVar[Dict[str, str]] = {
        **NoteIn.messages,
        "authors": "Authors must be specified in an array.",
        "authors.*": f"Each author's name is required and cannot exceed {_RULES.book.author_max_length} characters.",
        "format": one_of_message("Format", _RULES.book.formats),
        "status": one_of_message("Status", _RULES.book.statuses),
        "rating": f"Rating must be an integer between {_RULES.book.rating_min} and {_RULES.book.rating_max}.",
    }

# ---- workout ----

def _scalar_value(v: Any) -> Any:
    if v is None:
        raise PydanticCustomError("value_missing", "Value is required")
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise PydanticCustomError("value_missing", "Value is required")
    elif not is_scalar(v):
        raise ValueError("Value must be text, a number or true/false.")
    return v

class WorkoutMetricIn(RequestModel):
    property: Annotated[str, StringConstraints(min_length=1, max_length=_RULES.workout.property_max_length)]
    value: Annotated[Any, AfterValidator(_scalar_value)]

class WorkoutNoteIn(NoteIn):
    workout: Annotated[str, StringConstraints(min_length=1)]
    metrics: Optional[Annotated[List[WorkoutMetricIn], AfterValidator(no_duplicates(_DUP_METRICS))]] = None

    messages: ClassVar[Dict[str, str]] = {
        **NoteIn.messages,
        "workout": "A workout type is required.",
        "metrics": "Metrics must be specified in an array if it is specified at all.",
        "metrics.*": "Each metric must be an object with a property and a value.",
        "metrics.*.property": f"Property is required and cannot exceed {_RULES.workout.property_max_length} characters.",
        "metrics.*.value": "Value is required.",
    }

# =============================================================================
# Stored notes
# =============================================================================

class NoteRecordBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    kind: NoteKind
    type: str
    tags: List[str]
    date: str
    title: str
    description: Optional[str] = None
    people: List[str]
    place: str
    photoAlbum: Optional[str] = None
    createdAt: str
    updatedAt: str

class LifeNote(NoteRecordBase):
    kind: Literal[NoteKind.LIFE]

class HealthNote(NoteRecordBase):
    kind: Literal[NoteKind.HEALTH]

class BikeRideNote(NoteRecordBase):
    kind: Literal[NoteKind.BIKE_RIDE]
    bike: str
    metrics: List[Dict[str, Any]] = Field(default_factory=list)

class HikeNote(NoteRecordBase):
    kind: Literal[NoteKind.HIKE]
    metrics: List[Dict[str, Any]] = Field(default_factory=list)

class BookNote(NoteRecordBase):
    kind: Literal[NoteKind.BOOK]
    authors: List[str]
    format: Optional[str] = None
    status: str
    rating: Optional[int] = None

class WorkoutMetric(BaseModel):
    property: str
    value: Union[bool, int, float, str]

class WorkoutNote(NoteRecordBase):
    kind: Literal[NoteKind.WORKOUT]
    workout: str
    metrics: List[WorkoutMetric] = Field(default_factory=list)

NoteRecord = Annotated[
    Union[LifeNote, HealthNote, BikeRideNote, HikeNote, BookNote, WorkoutNote],
    Field(discriminator="kind"),
]
NOTE_RECORD = TypeAdapter(NoteRecord)

__all__ = [
    "NoteKind",
    "NoteIn",
    "LifeNoteIn",
    "HealthNoteIn",
    "BikeRideNoteIn",
    "HikeNoteIn",
    "BookNoteIn",
    "WorkoutNoteIn",
    "RideMetricsIn",
    "HikeMetricsIn",
    "WorkoutMetricIn",
    "NoteRecord",
    "NOTE_RECORD",
    "LifeNote",
    "HealthNote",
    "BikeRideNote",
    "HikeNote",
    "BookNote",
    "WorkoutNote",
]
