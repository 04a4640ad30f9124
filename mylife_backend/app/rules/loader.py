# mylife_backend/app/rules/loader.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from mylife_backend.app.config.paths import resolve_rules_file

log = logging.getLogger("mylife.rules")

RECORD_RULES_FILE = "record_rules.yaml"

# -----------------------------------------------------------------------------
# Config structs (one per entity / note variant)
# -----------------------------------------------------------------------------
class _Rules(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

class TagRules(_Rules):
    name_max_length: int = Field(gt=0)

class PersonRules(_Rules):
    name_max_length: int = Field(gt=0)
    google_photo_url_max_length: int = Field(gt=0)
    picasa_contact_id_max_length: int = Field(gt=0)
    min_tags: int = Field(ge=0)

class NoteRules(_Rules):
    title_max_length: int = Field(gt=0)

class BikeRideRules(_Rules):
    bikes: List[str] = Field(min_length=1)
    data_sources: List[str] = Field(min_length=1)

class HikeRules(_Rules):
    data_source_max_length: int = Field(gt=0)

class BookRules(_Rules):
    author_max_length: int = Field(gt=0)
    formats: List[str] = Field(min_length=1)
    statuses: List[str] = Field(min_length=1)
    rating_min: int
    rating_max: int

    @model_validator(mode="after")
    def _rating_bounds(self) -> "BookRules":
        if self.rating_min > self.rating_max:
            raise ValueError("book.rating_min must not exceed book.rating_max")
        return self

class WorkoutRules(_Rules):
    property_max_length: int = Field(gt=0)

class RecordRules(_Rules):
    tag: TagRules
    person: PersonRules
    note: NoteRules
    bike_ride: BikeRideRules
    hike: HikeRules
    book: BookRules
    workout: WorkoutRules

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _load_yaml_from(path: Path) -> Any:
    try:
        txt = path.read_text(encoding="utf-8")
        return yaml.safe_load(txt)
    except FileNotFoundError:
        raise
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

# -----------------------------------------------------------------------------
# Public loader API
# -----------------------------------------------------------------------------
def load_record_rules(path: Path) -> RecordRules:
    """
    Parse and validate a rules file. Raises FileNotFoundError if missing and
    ValueError if the YAML or its shape is invalid.
    """
    raw = _load_yaml_from(path)
    try:
        rules = RecordRules.model_validate(raw or {})
    except ValidationError as e:
        raise ValueError(f"Invalid record rules in {path}: {e}") from e
    log.info("[rules] loaded %s from %s", path.name, path)
    return rules

@lru_cache(maxsize=1)
def get_record_rules() -> RecordRules:
    """
    Returns the record rules (required). Cached for the process lifetime.
    """
    path = resolve_rules_file(RECORD_RULES_FILE)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    return load_record_rules(path)

def one_of_message(label: str, choices: List[str]) -> str:
    return f"{label} must be one of: {', '.join(choices)}."
