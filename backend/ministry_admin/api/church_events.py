from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.church_event import ChurchEventCreate, ChurchEventRead
from ministry_admin.schemas.common import DataResponse, DeletedRef, MessageResponse, PageResponse
from ministry_admin.services import church_events as svc
from ministry_admin.services.common import ListParams

router = APIRouter(prefix="/api/church-events", tags=["Church Events"])


@router.get("", response_model=PageResponse[ChurchEventRead])
def list_events(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = svc.list_events(db, params)
    return page_response(rows, total, params, ChurchEventRead)


@router.post(
    "",
    response_model=MessageResponse[ChurchEventRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_event(payload: ChurchEventCreate, db: Session = Depends(get_db)):
    event = svc.create_event(db, payload)
    return MessageResponse(message="Church event created successfully", data=ChurchEventRead.model_validate(event))


@router.get("/{event_id}", response_model=DataResponse[ChurchEventRead])
def get_event(event_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=ChurchEventRead.model_validate(svc.get_event(db, event_id)))


@router.put(
    "/{event_id}",
    response_model=MessageResponse[ChurchEventRead],
    dependencies=[Depends(require_admin)],
)
def update_event(event_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    event = svc.update_event(db, event_id, payload)
    return MessageResponse(message="Church event updated successfully", data=ChurchEventRead.model_validate(event))


@router.delete(
    "/{event_id}",
    response_model=MessageResponse[DeletedRef],
    dependencies=[Depends(require_admin)],
)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_event(db, event_id)
    return MessageResponse(message="Church event deleted successfully", data=ref)
