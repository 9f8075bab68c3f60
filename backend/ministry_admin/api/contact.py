from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.api.responses import page_response, xlsx_response
from ministry_admin.db import get_db
from ministry_admin.dependencies import list_params
from ministry_admin.schemas.common import DataResponse, DeletedRef, MessageResponse, PageResponse
from ministry_admin.schemas.contact import ContactCreate, ContactRead
from ministry_admin.services import contact as svc
from ministry_admin.services import exports
from ministry_admin.services.common import ListParams

router = APIRouter(prefix="/api/contact", tags=["Contact"])


# Public: the contact form on the website
@router.post("", response_model=MessageResponse[ContactRead], status_code=status.HTTP_201_CREATED)
def submit_contact(payload: ContactCreate, db: Session = Depends(get_db)):
    submission = svc.create_submission(db, payload)
    return MessageResponse(message="Message sent successfully", data=ContactRead.model_validate(submission))


@router.get("", response_model=PageResponse[ContactRead], dependencies=[Depends(require_admin)])
def list_submissions(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    rows, total = svc.list_submissions(db, params)
    return page_response(rows, total, params, ContactRead)


@router.get("/export", dependencies=[Depends(require_admin)])
def export_submissions(db: Session = Depends(get_db)):
    content = exports.build_workbook("Contact", exports.CONTACT_COLUMNS, svc.all_submissions(db))
    return xlsx_response(content, "contact")


@router.get("/{submission_id}", response_model=DataResponse[ContactRead], dependencies=[Depends(require_admin)])
def get_submission(submission_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=ContactRead.model_validate(svc.get_submission(db, submission_id)))


@router.put(
    "/{submission_id}",
    response_model=MessageResponse[ContactRead],
    dependencies=[Depends(require_admin)],
)
def update_submission(submission_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    submission = svc.update_submission(db, submission_id, payload)
    return MessageResponse(message="Contact submission updated", data=ContactRead.model_validate(submission))


@router.delete(
    "/{submission_id}",
    response_model=MessageResponse[DeletedRef],
    dependencies=[Depends(require_admin)],
)
def delete_submission(submission_id: int, db: Session = Depends(get_db)):
    ref = svc.delete_submission(db, submission_id)
    return MessageResponse(message="Contact submission deleted", data=ref)
