# mylife_backend/app/services/validation/uniqueness.py
"""
Natural-key uniqueness checks.

Create: no record may share the key. Update: the target must exist exactly
once, and a record sharing the key is fine only if it is the target itself.
These run on lookups the caller already made (see references.run_lookups).
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from mylife_backend.app.services.data_stores import Record
from mylife_backend.app.services.errors import ConsistencyError, RecordNotFoundError

log = logging.getLogger("mylife.validation")

def unique_on_create(matches: Sequence[Record], conflict_message: str) -> Optional[str]:
    return conflict_message if matches else None

def require_single_target(by_id: Sequence[Record], entity: str, record_id: str, *, data=None) -> Record:
    if not by_id:
        raise RecordNotFoundError(f"A {entity} with ID '{record_id}' does not exist.", data=data)
    if len(by_id) > 1:
        log.error("[unique] %d %s records share id %s", len(by_id), entity, record_id)
        raise ConsistencyError(
            f"There are '{len(by_id)}' {entity} records with ID '{record_id}'; there should be only one.",
            data=data,
        )
    return by_id[0]

def unique_on_update(
    matches: Sequence[Record],
    record_id: str,
    conflict_message: str,
    *,
    entity: str,
    data=None,
) -> Optional[str]:
    if len(matches) > 1:
        log.error("[unique] %d %s records share one natural key", len(matches), entity)
        raise ConsistencyError(
            f"There are '{len(matches)}' {entity} records with the same key as ID '{record_id}'; there should be at most one.",
            data=data,
        )
    if len(matches) == 1 and matches[0].get("id") != record_id:
        return conflict_message
    return None

def collect(messages: List[Optional[str]]) -> List[str]:
    return [m for m in messages if m]

__all__ = ["unique_on_create", "unique_on_update", "require_single_target", "collect"]
