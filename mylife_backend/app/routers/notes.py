# mylife_backend/app/routers/notes.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from mylife_backend.app.services.data_stores import Database, get_database
from mylife_backend.app.services.router_helpers.note_helpers import (
    count_notes as _count,
    create_note as _create,
    delete_note as _delete,
    read_all_notes as _read_all,
    read_note as _read,
    update_note as _update,
)

router = APIRouter(prefix="/notes", tags=["notes"])

@router.get("/count")
def count_notes(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _count(db)

@router.get("")
def read_all_notes(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read_all(db)

@router.post("", status_code=status.HTTP_201_CREATED)
def create_note(body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _create(db, body)

@router.get("/{note_id}")
def read_note(note_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read(db, note_id)

@router.put("/{note_id}")
def update_note(note_id: str, body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _update(db, note_id, body)

@router.delete("/{note_id}")
def delete_note(note_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _delete(db, note_id)
