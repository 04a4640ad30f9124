# mylife_backend/app/services/validation/field_validator.py
"""
Syntactic validation of request bodies.

Runs a RequestModel over the raw payload and turns pydantic's errors into
field violations:

    {"value": <offending value>, "msg": <message>, "param": "metrics[0].movingTime", "location": "body"}

`value` is left out when the field is absent. Every field is checked and
each field reports its first failing rule only.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError

from mylife_backend.app.models.common import RequestModel
from mylife_backend.app.models.notes import NoteIn
from mylife_backend.app.services.errors import FieldValidationError
from mylife_backend.app.services.note_variants import NoteVariant, variant_for
from mylife_backend.app.utils.strings import trim_strings

M = TypeVar("M", bound=RequestModel)

Violation = Dict[str, Any]

# -----------------------------------------------------------------------------
# Error translation
# -----------------------------------------------------------------------------
def loc_to_param(loc: Sequence[Any]) -> str:
    """("metrics", 0, "movingTime") -> "metrics[0].movingTime" """
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out

def loc_to_key(loc: Sequence[Any]) -> str:
    """("metrics", 0, "movingTime") -> "metrics.*.movingTime" (message table key)"""
    return ".".join("*" if isinstance(p, int) else str(p) for p in loc)

def _message(model: Type[RequestModel], err: Dict[str, Any]) -> str:
    if err.get("type") == "value_error":
        # raised by a custom rule: its text is the message
        ctx = err.get("ctx") or {}
        if "error" in ctx:
            return str(ctx["error"])
    return model.messages.get(loc_to_key(err["loc"])) or err.get("msg", "Invalid value.")

def to_violations(model: Type[RequestModel], exc: ValidationError) -> List[Violation]:
    out: List[Violation] = []
    seen = set()
    for err in exc.errors():
        param = loc_to_param(err["loc"])
        if param in seen:
            continue
        seen.add(param)
        v: Violation = {}
        if err.get("type") != "missing":
            v["value"] = trim_strings(err.get("input"))
        v.update(msg=_message(model, err), param=param, location="body")
        out.append(v)
    return out

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def check_fields(model: Type[M], payload: Dict[str, Any]) -> Tuple[Optional[M], List[Violation]]:
    """Validate without raising: (instance, []) or (None, violations)."""
    try:
        return model.model_validate(payload), []
    except ValidationError as e:
        return None, to_violations(model, e)

def validate_fields(model: Type[M], payload: Dict[str, Any]) -> M:
    """Validated instance, or FieldValidationError echoing the trimmed body."""
    instance, violations = check_fields(model, payload)
    if violations:
        raise FieldValidationError(violations, data=trim_strings(payload))
    return instance

def validate_note_fields(payload: Dict[str, Any]) -> Tuple[NoteVariant, NoteIn]:
    """
    Pick the variant from the trimmed `type` name and validate against its
    model. A missing or blank type is reported by the envelope model; a type
    naming no known variant is rejected outright.
    """
    raw_type = payload.get("type")
    type_name = raw_type.strip() if isinstance(raw_type, str) else ""
    variant = variant_for(type_name) if type_name else None
    if variant is None:
        if type_name:
            raise FieldValidationError([f"Invalid note type '{type_name}'."], data=trim_strings(payload))
        # report the blank type together with every other envelope error
        validate_fields(NoteIn, payload)
        raise FieldValidationError([NoteIn.messages["type"]], data=trim_strings(payload))
    return variant, validate_fields(variant.request_model, payload)

__all__ = [
    "Violation",
    "loc_to_param",
    "loc_to_key",
    "to_violations",
    "check_fields",
    "validate_fields",
    "validate_note_fields",
]
