# mylife_backend/app/routers/tags.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from mylife_backend.app.services.data_stores import Database, get_database
from mylife_backend.app.services.router_helpers.tag_helpers import (
    count_tags as _count,
    create_tag as _create,
    delete_tag as _delete,
    read_all_tags as _read_all,
    read_tag as _read,
    update_tag as _update,
)

# Mounted twice: /tags and /tag both reach every route.
router = APIRouter(tags=["tags"])

@router.get("/count")
def count_tags(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _count(db)

@router.get("")
def read_all_tags(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read_all(db)

@router.post("", status_code=status.HTTP_201_CREATED)
def create_tag(body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _create(db, body)

@router.get("/{tag_id}")
def read_tag(tag_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read(db, tag_id)

@router.put("/{tag_id}")
def update_tag(tag_id: str, body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _update(db, tag_id, body)

@router.delete("/{tag_id}")
def delete_tag(tag_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _delete(db, tag_id)
