# mylife_backend/app/models/people.py
from __future__ import annotations

from typing import ClassVar, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from typing_extensions import Annotated

from mylife_backend.app.rules.loader import get_record_rules
from .common import IsoDate, RequestModel, no_duplicates

_R = get_record_rules().person

Name = Annotated[str, StringConstraints(max_length=_R.name_max_length)]

def _enough_tags(tags: List[str]) -> List[str]:
    if len(tags) < _R.min_tags:
        raise ValueError("The tag must contain at least one value.")
    return tags

class PersonNoteIn(RequestModel):
    date: Optional[IsoDate] = None       # defaults to today on construction
    note: Annotated[str, StringConstraints(min_length=1)]

class PersonPhotoIn(RequestModel):
    description: Optional[str] = None
    image: Annotated[str, StringConstraints(min_length=1)]

class PersonIn(RequestModel):
    firstName: Annotated[str, StringConstraints(min_length=1, max_length=_R.name_max_length)]
    middleName: Optional[Name] = None
    lastName: Optional[Name] = None
    preferredName: Optional[Name] = None
    birthdate: Optional[IsoDate] = None
    googlePhotoUrl: Optional[Annotated[str, StringConstraints(max_length=_R.google_photo_url_max_length)]] = None
    picasaContactId: Optional[Annotated[str, StringConstraints(max_length=_R.picasa_contact_id_max_length)]] = None
    tags: Annotated[
        List[str],
        AfterValidator(no_duplicates("Duplicate tags are not allowed.")),
        AfterValidator(_enough_tags),
    ]
    notes: Annotated[List[PersonNoteIn], AfterValidator(no_duplicates("Duplicate notes are not allowed."))] = Field(default_factory=list)
    photos: Annotated[List[PersonPhotoIn], AfterValidator(no_duplicates("Duplicate photos are not allowed."))] = Field(default_factory=list)

    messages: ClassVar[Dict[str, str]] = {
        "firstName": f"First name is required and must be less than {_R.name_max_length} characters long.",
        "middleName": f"Middle name must be less than {_R.name_max_length} characters long.",
        "lastName": f"Last name must be less than {_R.name_max_length} characters long.",
        "preferredName": f"Preferred name must be less than {_R.name_max_length} characters long.",
        "birthdate": "Birthdate must be a valid date.",
        "googlePhotoUrl": f"Google photo URL cannot exceed {_R.google_photo_url_max_length} characters.",
        "picasaContactId": f"Picasa contact ID cannot exceed {_R.picasa_contact_id_max_length} characters.",
        "tags": "Tags must be specified in an array.",
        "tags.*": "Each tag must be a name or ID.",
        "notes": "Notes must be specified in an array.",
        "notes.*": "Each note must be an object with a date and a note.",
        "notes.*.date": "A note date must be a valid date.",
        "notes.*.note": "A note is required.",
        "photos": "Photos must be specified in an array.",
        "photos.*": "Each photo must be an object with an image.",
        "photos.*.description": "A photo description must be text.",
        "photos.*.image": "An image must be specified.",
    }

class PersonNote(BaseModel):
    date: str
    note: str

class PersonPhoto(BaseModel):
    description: Optional[str] = None
    image: str

class PersonRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    firstName: str
    middleName: str = ""
    lastName: str = ""
    preferredName: str = ""
    birthdate: Optional[str] = None
    googlePhotoUrl: Optional[str] = None
    picasaContactId: Optional[str] = None
    tags: List[str]
    notes: List[PersonNote] = Field(default_factory=list)
    photos: List[PersonPhoto] = Field(default_factory=list)
    createdAt: str
    updatedAt: str

__all__ = ["PersonIn", "PersonNoteIn", "PersonPhotoIn", "PersonRecord", "PersonNote", "PersonPhoto"]
