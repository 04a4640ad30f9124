# mylife_backend/app/services/router_helpers/api_helpers.py
from __future__ import annotations

from mylife_backend.app.services.data_stores import Database
from mylife_backend.app.services.validation.references import run_lookups
from .responses import ok

def api_index() -> dict:
    return {"status": "ok", "messages": ["This is the /api/ route!"], "data": None}

def summary(db: Database) -> dict:
    """Record counts for the landing page."""
    counts = run_lookups({
        "notes": db.notes.estimated_count,
        "people": db.people.estimated_count,
        "tags": db.tags.estimated_count,
    })
    return ok(counts)
