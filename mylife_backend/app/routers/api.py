# mylife_backend/app/routers/api.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Depends

from mylife_backend.app.services.data_stores import Database, get_database
from mylife_backend.app.services.router_helpers.api_helpers import api_index, summary

router = APIRouter(tags=["api"])

@router.get("")
@router.get("/", include_in_schema=False)
def index() -> Dict[str, Any]:
    return api_index()

@router.get("/summary")
def get_summary(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return summary(db)
