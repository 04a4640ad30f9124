# mylife_backend/app/services/validation/references.py
"""
Reference validation.

A "master list" is what the store returns for a query keyed on exactly the
identifiers the client sent (plus a capability flag). It can only contain
records the client named, so equal lengths usually mean every identifier
resolved to a distinct, correctly flagged record. Derived keys (person
lookup names) can match several records, so a check also requires that no
identifier is missing or ambiguous before ids are resolved.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from mylife_backend.app.config import LOOKUP_WORKERS
from mylife_backend.app.services.data_stores import Record
from mylife_backend.app.utils.strings import quoted_list

T = TypeVar("T")

# -----------------------------------------------------------------------------
# Cardinality rule
# -----------------------------------------------------------------------------
def names_valid(
    master: Optional[Sequence[Record]],
    client: Optional[Sequence[str]],
    *,
    optional: bool = False,
) -> bool:
    """
    True when both lists are defined and the same length, or (optional
    references only) when neither holds anything.
    """
    if master is None or client is None:
        return optional and not master and not client
    return len(master) == len(client)

def _hits(master: Sequence[Record], ident: str, key: str) -> List[Record]:
    return [r for r in master if r.get(key) == ident or r.get("id") == ident]

def missing_items(master: Optional[Sequence[Record]], client: Optional[Sequence[str]], key: str = "name") -> List[str]:
    """
    Client identifiers with no master record of their own: unknown names or
    ids, and identifiers that only point at a record an earlier identifier
    already claimed (a name and its id given together).
    """
    master = master or []
    claimed = set()
    missing: List[str] = []
    for ident in client or []:
        free = [r for r in _hits(master, ident, key) if r["id"] not in claimed]
        if not free:
            missing.append(ident)
        else:
            claimed.add(free[0]["id"])
    return missing

def ambiguous_items(master: Optional[Sequence[Record]], client: Optional[Sequence[str]], key: str = "name") -> List[str]:
    """Client identifiers that match more than one master record."""
    master = master or []
    return [ident for ident in client or [] if len(_hits(master, ident, key)) > 1]

def resolve_ids(master: Sequence[Record], client: Sequence[str], key: str = "name") -> List[str]:
    """Record ids in client order. Only meaningful once a ReferenceCheck is valid."""
    out: List[str] = []
    for ident in client:
        hits = _hits(master, ident, key)
        out.append(hits[0]["id"])
    return out

# -----------------------------------------------------------------------------
# One reference category of a request
# -----------------------------------------------------------------------------
@dataclass
class ReferenceCheck:
    label: str                           # message wording: "type", "tag(s)", "people"...
    client: Optional[List[str]]
    master: Optional[List[Record]]
    key: str = "name"
    optional: bool = False

    @property
    def valid(self) -> bool:
        if not names_valid(self.master, self.client, optional=self.optional):
            return False
        return not missing_items(self.master, self.client, self.key) and not ambiguous_items(self.master, self.client, self.key)

    def message(self) -> Optional[str]:
        if self.valid:
            return None
        bad = missing_items(self.master, self.client, self.key) or ambiguous_items(self.master, self.client, self.key)
        return f"Invalid {self.label}: {quoted_list(bad)}."

    def ids(self) -> List[str]:
        return resolve_ids(self.master or [], self.client or [], self.key)

def reference_messages(checks: Sequence[ReferenceCheck]) -> List[str]:
    return [m for m in (c.message() for c in checks) if m]

# -----------------------------------------------------------------------------
# Fan-out
# -----------------------------------------------------------------------------
def run_lookups(lookups: Mapping[str, Callable[[], T]], *, workers: int = LOOKUP_WORKERS) -> Dict[str, T]:
    """
    Run independent store reads concurrently and join them. Results come back
    under the same names; the first failing lookup (in mapping order) raises.
    """
    if not lookups:
        return {}
    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(lookups))), thread_name_prefix="mylife-lookup") as pool:
        futures = {name: pool.submit(fn) for name, fn in lookups.items()}
        return {name: fut.result() for name, fut in futures.items()}

__all__ = [
    "names_valid",
    "missing_items",
    "ambiguous_items",
    "resolve_ids",
    "ReferenceCheck",
    "reference_messages",
    "run_lookups",
]
