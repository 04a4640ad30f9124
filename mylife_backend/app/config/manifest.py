# mylife_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import List

from .paths import clean_env

def _flag(name: str, default: str = "0") -> bool:
    raw = clean_env(os.getenv(name)) or default
    return raw not in ("", "0", "false", "False", "no", "off")

# ---- environment mode ----
APP_ENV: str = clean_env(os.getenv("APP_ENV")) or "development"
DEBUG_MODE: bool = _flag("DEBUG")
LOG_LEVEL: str = (clean_env(os.getenv("MYLIFE_LOG_LEVEL")) or ("DEBUG" if DEBUG_MODE else "INFO")).upper()

# ---- server ----
API_HOST: str = clean_env(os.getenv("API_HOST")) or "127.0.0.1"
API_PORT: int = int(clean_env(os.getenv("API_PORT")) or "8000")

CORS_ORIGINS: List[str] = [
    o.strip()
    for o in (clean_env(os.getenv("MYLIFE_CORS_ORIGINS")) or "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]

# ---- store ----
# Serialize create/update/delete pipelines in-process (closes the
# check-then-act window for single-process deployments).
def serialize_writes() -> bool:
    return _flag("MYLIFE_SERIALIZE_WRITES")

# Collection file names under DATA_DIR
TAGS_FILE = "tags.json"
PEOPLE_FILE = "people.json"
NOTES_FILE = "notes.json"

# Max parallel lookups per request (reference + uniqueness fan-out)
LOOKUP_WORKERS: int = int(clean_env(os.getenv("MYLIFE_LOOKUP_WORKERS")) or "6")
