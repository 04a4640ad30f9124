# mylife_backend/app/services/errors.py
from __future__ import annotations

from typing import Any, List, Optional

class RecordError(Exception):
    """
    Base for every request-terminal failure in the record pipeline.
    Carries the HTTP status, the message list and the payload to echo back.
    """
    status_code: int = 500

    def __init__(self, messages: List[Any] | str, data: Any = None) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages: List[Any] = list(messages)
        self.data = data
        super().__init__("; ".join(str(m) for m in self.messages))

    def with_data(self, data: Any) -> "RecordError":
        if self.data is None:
            self.data = data
        return self

class FieldValidationError(RecordError):
    status_code = 422

class InvalidReferenceError(RecordError):
    """Unresolvable references and natural-key collisions."""
    status_code = 422

class ReferentialIntegrityError(RecordError):
    status_code = 422

class RecordNotFoundError(RecordError):
    status_code = 404

class ConsistencyError(RecordError):
    """The store holds more than one record for a supposedly unique key."""
    status_code = 500

class StoreError(RecordError):
    status_code = 500

    def __init__(self, messages: List[Any] | str, data: Any = None, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(messages, data)
        self.cause = cause

__all__ = [
    "RecordError",
    "FieldValidationError",
    "InvalidReferenceError",
    "ReferentialIntegrityError",
    "RecordNotFoundError",
    "ConsistencyError",
    "StoreError",
]
