# mylife_backend/app/utils/strings.py
from __future__ import annotations

from typing import Any, Iterable, List

def trim_strings(value: Any) -> Any:
    """
    Recursively trim every string in a JSON-ish value (dicts, lists, scalars).
    Used to echo the sanitized request body back on validation failures.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        return {k: trim_strings(v) for k, v in value.items()}
    if isinstance(value, list):
        return [trim_strings(v) for v in value]
    return value

def quoted_list(items: Iterable[Any]) -> str:
    """['a', 'b'] -> "'a', 'b'" (message formatting)."""
    return ", ".join(f"'{i}'" for i in items)

def person_lookup_name(first: str | None, middle: str | None, last: str | None) -> str:
    """
    Name used to reference a person from a note:
      "" middle      -> "First Last"
      one-letter     -> "First M. Last"
      longer         -> "First Middle Last"
    """
    first = first or ""
    middle = middle or ""
    last = last or ""
    if len(middle) == 0:
        mid = " "
    elif len(middle) == 1:
        mid = f" {middle}. "
    else:
        mid = f" {middle} "
    return f"{first}{mid}{last}"

def person_display_name(first: str | None, preferred: str | None, middle: str | None, last: str | None) -> str:
    """Human-facing name: First (Preferred) M. Last."""
    parts: List[str] = [first or ""]
    if preferred:
        parts[0] = f"{parts[0]} ({preferred})"
    if middle:
        parts.append(f"{middle}." if len(middle) == 1 else middle)
    if last:
        parts.append(last)
    return " ".join(p for p in parts if p)
