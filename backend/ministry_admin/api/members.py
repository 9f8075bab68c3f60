from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response, xlsx_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.common import DataResponse, DeletedRef, ListResponse, MessageResponse, PageResponse
from ministry_admin.schemas.member import MemberCreate, MemberRead, MemberSearchHit, RecentMember
from ministry_admin.services import exports
from ministry_admin.services import members as svc
from ministry_admin.services.common import ListParams

router = APIRouter(prefix="/api/members", tags=["Members"], dependencies=[Depends(require_admin)])


@router.get("", response_model=PageResponse[MemberRead])
def list_members(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = svc.list_members(db, params)
    return page_response(rows, total, params, MemberRead)


@router.post("", response_model=MessageResponse[MemberRead], status_code=status.HTTP_201_CREATED)
def create_member(payload: MemberCreate, db: Session = Depends(get_db)):
    member = svc.create_member(db, payload)
    return MessageResponse(message="Member created successfully", data=MemberRead.model_validate(member))


@router.get("/search", response_model=ListResponse[MemberSearchHit])
def search_members(q: Optional[str] = Query(None, max_length=200), db: Session = Depends(get_db)):
    hits = svc.search_members(db, q)
    return ListResponse(data=hits, count=len(hits))


@router.get("/recent", response_model=ListResponse[RecentMember])
def recent_members(db: Session = Depends(get_db)):
    rows = svc.recent_members(db)
    return ListResponse(data=rows, count=len(rows))


@router.get("/export")
def export_members(db: Session = Depends(get_db)):
    content = exports.build_workbook("Members", exports.MEMBER_COLUMNS, svc.all_members(db))
    return xlsx_response(content, "members")


@router.get("/{member_id}", response_model=DataResponse[MemberRead])
def get_member(member_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=MemberRead.model_validate(svc.get_member(db, member_id)))


@router.put("/{member_id}", response_model=MessageResponse[MemberRead])
def update_member(member_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    member = svc.update_member(db, member_id, payload)
    return MessageResponse(message="Member updated successfully", data=MemberRead.model_validate(member))


@router.delete("/{member_id}", response_model=MessageResponse[DeletedRef])
def delete_member(member_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_member(db, member_id)
    return MessageResponse(message="Member deleted successfully", data=ref)
