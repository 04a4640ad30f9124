# mylife_backend/app/models/common.py
from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Callable, ClassVar, Dict, List, Sequence

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated

# ===================== Base request model =====================

class RequestModel(BaseModel):
    """
    Base for client payloads. Strings are trimmed before any rule runs and
    unknown keys are ignored. `messages` maps a field path ("title",
    "metrics.*.movingTime") to the message reported when a built-in rule
    (type, length, range, choice) fails on that field.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    messages: ClassVar[Dict[str, str]] = {}

# ===================== Shared field types =====================

def _date_text(v: Any) -> Any:
    # dates must arrive as text; numbers are not timestamps here
    if not isinstance(v, str):
        raise PydanticCustomError("date_type", "Input should be a date string")
    return v.strip()

IsoDate = Annotated[date, BeforeValidator(_date_text)]
IsoDateTime = Annotated[datetime, BeforeValidator(_date_text)]

# ===================== Rule helpers =====================

def one_of(choices: Sequence[str]) -> Callable[[str], str]:
    """After-validator: value must be one of `choices` (message comes from the model table)."""
    allowed = tuple(choices)

    def _check(v: str) -> str:
        if v not in allowed:
            raise PydanticCustomError("choice", "Value is not one of the allowed choices")
        return v
    return _check

def _dup_key(item: Any) -> str:
    if isinstance(item, BaseModel):
        item = item.model_dump(mode="json")
    return json.dumps(item, sort_keys=True, default=str)

def contains_duplicates(items: List[Any]) -> bool:
    seen = set()
    for it in items:
        k = _dup_key(it)
        if k in seen:
            return True
        seen.add(k)
    return False

def no_duplicates(message: str) -> Callable[[List[Any]], List[Any]]:
    def _check(items: List[Any]) -> List[Any]:
        if items is not None and contains_duplicates(items):
            raise ValueError(message)
        return items
    return _check

def is_scalar(v: Any) -> bool:
    return isinstance(v, (str, int, float, bool))
