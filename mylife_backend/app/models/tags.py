# mylife_backend/app/models/tags.py
from __future__ import annotations

from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from typing_extensions import Annotated

from mylife_backend.app.rules.loader import get_record_rules
from .common import RequestModel

_R = get_record_rules().tag

class TagIn(RequestModel):
    name: Annotated[str, StringConstraints(min_length=1, max_length=_R.name_max_length)]
    description: str                     # required, may be ""
    image: Optional[str] = None
    isType: bool
    isTag: bool
    isWorkout: bool
    isPerson: bool

    messages: ClassVar[Dict[str, str]] = {
        "name": f"A tag name is required; it must be between 1 and {_R.name_max_length} characters long.",
        "description": "Description is required but it can be an empty string.",
        "image": "Image must be a string reference if it is specified at all.",
        "isType": "IsType is required and it must be either true or false.",
        "isTag": "IsTag is required and it must be either true or false.",
        "isWorkout": "IsWorkout is required and it must be either true or false.",
        "isPerson": "IsPerson is required and it must be either true or false.",
    }

class TagRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str
    image: Optional[str] = None
    isType: bool
    isTag: bool
    isWorkout: bool
    isPerson: bool
    createdAt: str
    updatedAt: str

__all__ = ["TagIn", "TagRecord"]
