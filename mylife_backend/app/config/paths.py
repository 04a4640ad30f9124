# mylife_backend/app/config/paths.py
"""
Central path resolution for mylife.

Env overrides:
    DATA_DIR
    MYLIFE_RULES_DIR

Defaults:
    <repo_root>/data
    <repo_root>/mylife_backend/app/rules

Exports:
    - constants: REPO_ROOT, APP_ROOT
    - getters: get_data_dir(), get_rules_dir()
    - resolver: resolve_rules_file()
"""
from __future__ import annotations

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "mylife_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = _THIS_FILE.parents[1]

def clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_data = REPO_ROOT / "data"
_default_rules = APP_ROOT / "rules"

# DATA_DIR is read on every call so tests (and the CLI) can repoint it
# after import.
def get_data_dir() -> Path:
    return (_env_path("DATA_DIR") or _default_data).resolve()

def get_rules_dir() -> Path:
    return (_env_path("MYLIFE_RULES_DIR") or _default_rules).resolve()

# ── Resolvers
def resolve_rules_file(name: str) -> Path:
    """Return absolute path under the rules dir for a given filename."""
    return get_rules_dir() / name

__all__ = [
    # constants
    "REPO_ROOT", "APP_ROOT",
    # getters
    "get_data_dir", "get_rules_dir",
    # resolvers
    "resolve_rules_file",
    # helpers
    "clean_env",
]
