# ministry_admin/api/ministers.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response, xlsx_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.common import DataResponse, DeletedRef, ListResponse, MessageResponse, PageResponse
from ministry_admin.schemas.minister import (
    MinisterCreate,
    MinisterDetails,
    MinisterRead,
    MinisterSearchHit,
    MinisterSummary,
)
from ministry_admin.services import exports
from ministry_admin.services import ministers as svc
from ministry_admin.services.common import ListParams

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ministers", tags=["Ministers"], dependencies=[Depends(require_admin)])


@router.get("", response_model=PageResponse[MinisterSummary])
def list_ministers(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = svc.list_ministers(db, params)
    return page_response(rows, total, params, MinisterSummary)


@router.post("", response_model=MessageResponse[MinisterDetails], status_code=status.HTTP_201_CREATED)
def create_minister(payload: MinisterCreate, db: Session = Depends(get_db)):
    minister, counts = svc.create_minister(db, payload)
    logger.info("POST /api/ministers -> id=%s rows=%s", minister.id, counts)
    return MessageResponse(
        message="Minister created successfully",
        data=svc.get_minister_details(db, minister.id),
    )


@router.get("/search", response_model=ListResponse[MinisterSearchHit])
def search_ministers(q: Optional[str] = Query(None, max_length=200), db: Session = Depends(get_db)):
    hits = svc.search_ministers(db, q)
    return ListResponse(data=hits, count=len(hits))


@router.get("/export")
def export_ministers(db: Session = Depends(get_db)):
    content = exports.build_workbook("Ministers", exports.MINISTER_COLUMNS, svc.all_ministers(db))
    return xlsx_response(content, "ministers")


@router.get("/{minister_id}", response_model=DataResponse[MinisterRead])
def get_minister(minister_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=MinisterRead.model_validate(svc.get_minister(db, minister_id)))


@router.get("/{minister_id}/details", response_model=DataResponse[MinisterDetails])
def get_minister_details(minister_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=svc.get_minister_details(db, minister_id))


@router.put("/{minister_id}", response_model=MessageResponse[MinisterRead])
def update_minister(minister_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    minister = svc.update_minister(db, minister_id, payload)
    return MessageResponse(message="Minister updated successfully", data=MinisterRead.model_validate(minister))


@router.delete("/{minister_id}", response_model=MessageResponse[DeletedRef])
def delete_minister(minister_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_minister(db, minister_id)
    return MessageResponse(message="Minister deleted successfully", data=ref)


# ---- Dependent collections ------------------------------------------------------

@router.get("/{minister_id}/{collection}", response_model=ListResponse[Dict[str, Any]])
def list_collection(minister_id: int, collection: str, db: Session = Depends(get_db)):
    rows = svc.list_collection(db, minister_id, collection)
    data = [r.model_dump(mode="json", by_alias=True) for r in rows]
    return ListResponse(data=data, count=len(data))


@router.post(
    "/{minister_id}/{collection}",
    response_model=MessageResponse[Dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
)
def add_collection_row(
    minister_id: int, collection: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)
):
    row = svc.add_collection_row(db, minister_id, collection, payload)
    return MessageResponse(message="Record added successfully", data=row.model_dump(mode="json", by_alias=True))


@router.put("/{minister_id}/{collection}/{row_id}", response_model=MessageResponse[Dict[str, Any]])
def update_collection_row(
    minister_id: int,
    collection: str,
    row_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    row = svc.update_collection_row(db, minister_id, collection, row_id, payload)
    return MessageResponse(message="Record updated successfully", data=row.model_dump(mode="json", by_alias=True))


@router.delete("/{minister_id}/{collection}/{row_id}", response_model=MessageResponse[DeletedRef])
def delete_collection_row(minister_id: int, collection: str, row_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_collection_row(db, minister_id, collection, row_id)
    return MessageResponse(message="Record deleted successfully", data=ref)
