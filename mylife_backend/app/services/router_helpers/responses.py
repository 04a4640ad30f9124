# mylife_backend/app/services/router_helpers/responses.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from mylife_backend.app.services.errors import ConsistencyError, RecordError, StoreError

def ok(data: Any, messages: Optional[List[Any]] = None) -> dict:
    return {"status": "ok", "messages": list(messages or []), "data": data}

def error(messages: List[Any], data: Any = None) -> dict:
    return {"status": "error", "messages": list(messages), "data": data}

@contextmanager
def logged_pipeline(log: logging.Logger, action: str) -> Iterator[None]:
    """Log why a pipeline stopped, then let the error reach the app handlers."""
    try:
        yield
    except (ConsistencyError, StoreError) as e:
        log.error("%s failed (%s): %s", action, type(e).__name__, e)
        raise
    except RecordError as e:
        log.info("%s rejected (%s): %d message(s)", action, type(e).__name__, len(e.messages))
        raise
