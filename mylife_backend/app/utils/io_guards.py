# mylife_backend/app/utils/io_guards.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from mylife_backend.app.config.paths import get_rules_dir

def _is_under(path: Path, roots: Iterable[Path]) -> bool:
    p = path.resolve()
    for r in roots:
        try:
            p.relative_to(r)
            return True
        except ValueError:
            continue
    return False

def assert_writable(path: Path) -> None:
    """
    Raise a PermissionError if `path` is under the read-only rules directory.
    Call before any store write.
    """
    rules_dir = get_rules_dir().resolve()
    if _is_under(path, [rules_dir]):
        raise PermissionError(
            f"Attempted write under read-only rules directory: {path} (rules={rules_dir})"
        )
