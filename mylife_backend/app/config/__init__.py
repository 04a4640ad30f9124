# mylife_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env settings live in manifest.py
from .manifest import (
    APP_ENV,
    DEBUG_MODE,
    LOG_LEVEL,
    API_HOST,
    API_PORT,
    CORS_ORIGINS,
    TAGS_FILE,
    PEOPLE_FILE,
    NOTES_FILE,
    LOOKUP_WORKERS,
    serialize_writes,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    get_data_dir,
    get_rules_dir,
    resolve_rules_file,
)

__all__ = [
    # manifest
    "APP_ENV",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "API_HOST",
    "API_PORT",
    "CORS_ORIGINS",
    "TAGS_FILE",
    "PEOPLE_FILE",
    "NOTES_FILE",
    "LOOKUP_WORKERS",
    "serialize_writes",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "get_data_dir",
    "get_rules_dir",
    "resolve_rules_file",
]
