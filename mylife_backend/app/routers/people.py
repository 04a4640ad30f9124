# mylife_backend/app/routers/people.py
from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from mylife_backend.app.services.data_stores import Database, get_database
from mylife_backend.app.services.router_helpers.person_helpers import (
    count_people as _count,
    create_person as _create,
    delete_person as _delete,
    read_all_people as _read_all,
    read_person as _read,
    update_person as _update,
)

router = APIRouter(prefix="/people", tags=["people"])

@router.get("/count")
def count_people(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _count(db)

@router.get("")
def read_all_people(db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read_all(db)

@router.post("", status_code=status.HTTP_201_CREATED)
def create_person(body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _create(db, body)

@router.get("/{person_id}")
def read_person(person_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _read(db, person_id)

@router.put("/{person_id}")
def update_person(person_id: str, body: Dict[str, Any] = Body(...), db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _update(db, person_id, body)

@router.delete("/{person_id}")
def delete_person(person_id: str, db: Database = Depends(get_database)) -> Dict[str, Any]:
    return _delete(db, person_id)
