# mylife_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

Import from here in helpers/routers, e.g.:
    from mylife_backend.app.services.data_stores import (
        Database, get_database, open_database,
        find_tags_by_identifiers, find_people_by_identifiers,
        find_notes_by_date_title,
    )
"""

from __future__ import annotations

# ---- Low-level IO helpers ----
from .io_utils import read_json, atomic_write  # noqa: F401

# ---- Generic collection ----
from .document_store import (  # noqa: F401
    ASCENDING,
    DESCENDING,
    DocumentStore,
    Record,
    new_id,
)

# ---- Database / dependency ----
from .database import Database, get_database, open_database  # noqa: F401

# ---- Tags ----
from .tags import (  # noqa: F401
    TAG_FLAGS,
    find_tags_by_id,
    find_tags_by_identifiers,
    find_tags_by_name,
    list_tags,
)

# ---- People ----
from .people import (  # noqa: F401
    LOOKUP_NAME,
    count_people_tagged,
    find_people_by_id,
    find_people_by_identifiers,
    find_people_by_natural_key,
    list_people,
)

# ---- Notes ----
from .notes import (  # noqa: F401
    count_notes_tagged,
    count_notes_typed,
    count_workouts_of,
    find_notes_by_date_title,
    find_notes_by_id,
    list_notes,
)
