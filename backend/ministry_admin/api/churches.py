# ministry_admin/api/churches.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response, xlsx_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.church import ChurchCreate, ChurchRead, ChurchStats
from ministry_admin.schemas.common import DataResponse, DeletedRef, MessageResponse, PageResponse
from ministry_admin.schemas.member import MemberRead
from ministry_admin.schemas.minister import MinisterSummary
from ministry_admin.services import churches as svc
from ministry_admin.services import exports
from ministry_admin.services.common import ListParams
from ministry_admin.services.members import all_members, list_members
from ministry_admin.services.ministers import all_ministers, list_ministers


router = APIRouter(prefix="/api/churches", tags=["Churches"])


@router.get("", response_model=PageResponse[ChurchRead])
def list_churches(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = svc.list_churches(db, params)
    return page_response(rows, total, params, ChurchRead)


@router.post(
    "",
    response_model=MessageResponse[ChurchRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_church(payload: ChurchCreate, db: Session = Depends(get_db)):
    church = svc.create_church(db, payload)
    return MessageResponse(message="Church created successfully", data=ChurchRead.model_validate(church))


@router.get("/export", dependencies=[Depends(require_admin)])
def export_churches(db: Session = Depends(get_db)):
    content = exports.build_workbook("Churches", exports.CHURCH_COLUMNS, svc.all_churches(db))
    return xlsx_response(content, "churches")


@router.get("/{church_id}", response_model=DataResponse[ChurchRead])
def get_church(church_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=ChurchRead.model_validate(svc.get_church(db, church_id)))


@router.put(
    "/{church_id}",
    response_model=MessageResponse[ChurchRead],
    dependencies=[Depends(require_admin)],
)
def update_church(church_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    church = svc.update_church(db, church_id, payload)
    return MessageResponse(message="Church updated successfully", data=ChurchRead.model_validate(church))


@router.delete(
    "/{church_id}",
    response_model=MessageResponse[DeletedRef],
    dependencies=[Depends(require_admin)],
)
def delete_church(church_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_church(db, church_id)
    return MessageResponse(message="Church deleted successfully", data=ref)


@router.get("/{church_id}/stats", response_model=DataResponse[ChurchStats])
def church_stats(church_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=svc.church_stats(db, church_id))


# ---- Church-scoped people -------------------------------------------------------

@router.get(
    "/{church_id}/members",
    response_model=PageResponse[MemberRead],
    dependencies=[Depends(require_admin)],
)
def church_members(church_id: int, params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = list_members(db, params, church_id=church_id)
    return page_response(rows, total, params, MemberRead)


@router.get("/{church_id}/members/export", dependencies=[Depends(require_admin)])
def export_church_members(church_id: int, db: Session = Depends(get_db)):
    rows = all_members(db, church_id=church_id)
    content = exports.build_workbook("Members", exports.MEMBER_COLUMNS, rows)
    return xlsx_response(content, f"church-{church_id}-members")


@router.get(
    "/{church_id}/ministers",
    response_model=PageResponse[MinisterSummary],
    dependencies=[Depends(require_admin)],
)
def church_ministers(church_id: int, params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = list_ministers(db, params, church_id=church_id)
    return page_response(rows, total, params, MinisterSummary)


@router.get("/{church_id}/ministers/export", dependencies=[Depends(require_admin)])
def export_church_ministers(church_id: int, db: Session = Depends(get_db)):
    rows = all_ministers(db, church_id=church_id)
    content = exports.build_workbook("Ministers", exports.MINISTER_COLUMNS, rows)
    return xlsx_response(content, f"church-{church_id}-ministers")
