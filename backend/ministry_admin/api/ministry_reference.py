# ministry_admin/api/ministry_reference.py
"""Routers for /api/ministry-ranks and /api/ministry-skills (same shape)."""
from typing import Any, Dict, Type

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response, xlsx_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.common import DataResponse, DeletedRef, MessageResponse, PageResponse
from ministry_admin.schemas.ministry_reference import (
    MinistryRankCreate,
    MinistryRankRead,
    MinistrySkillCreate,
    MinistrySkillRead,
)
from ministry_admin.services import exports
from ministry_admin.services.common import ListParams
from ministry_admin.services.ministry_reference import ReferenceTable, ranks, skills


def build_router(
    prefix: str,
    tag: str,
    table: ReferenceTable,
    create_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    export_name: str,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    label = table.label

    @router.get("", response_model=PageResponse[read_schema])
    def list_rows(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
        rows, total = table.list(db, params)
        return page_response(rows, total, params, read_schema)

    @router.post(
        "",
        response_model=MessageResponse[read_schema],
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_admin)],
    )
    def create_row(payload: create_schema, db: Session = Depends(get_db)):  # type: ignore[valid-type]
        obj = table.create(db, payload)
        return MessageResponse(message=f"{label} created successfully", data=read_schema.model_validate(obj))

    @router.get("/export", dependencies=[Depends(require_admin)])
    def export_rows(db: Session = Depends(get_db)):
        content = exports.build_workbook(tag, exports.REFERENCE_COLUMNS, table.all(db))
        return xlsx_response(content, export_name)

    @router.get("/{obj_id}", response_model=DataResponse[read_schema])
    def get_row(obj_id: int, db: Session = Depends(get_db)):
        return DataResponse(data=read_schema.model_validate(table.get(db, obj_id)))

    @router.put(
        "/{obj_id}",
        response_model=MessageResponse[read_schema],
        dependencies=[Depends(require_admin)],
    )
    def update_row(obj_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
        obj = table.update(db, obj_id, payload)
        return MessageResponse(message=f"{label} updated successfully", data=read_schema.model_validate(obj))

    @router.delete(
        "/{obj_id}",
        response_model=MessageResponse[DeletedRef],
        dependencies=[Depends(require_admin)],
    )
    def delete_row(obj_id: int, db: Session = Depends(get_db)):
        ref = table.delete(db, obj_id)
        return MessageResponse(message=f"{label} deleted successfully", data=ref)

    return router


ranks_router = build_router(
    "/api/ministry-ranks", "Ministry Ranks", ranks, MinistryRankCreate, MinistryRankRead, "ministry-ranks"
)
skills_router = build_router(
    "/api/ministry-skills", "Ministry Skills", skills, MinistrySkillCreate, MinistrySkillRead, "ministry-skills"
)
