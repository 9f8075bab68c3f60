from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from ministry_admin.models import ContactSubmission
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.schemas.contact import ContactCreate, ContactUpdate
from ministry_admin.services.common import ListParams, apply_fields, commit, fetch_page, get_or_404
from ministry_admin.validation import validate_record

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "id": ContactSubmission.id,
    "name": ContactSubmission.name,
    "email": ContactSubmission.email,
    "subject": ContactSubmission.subject,
    "createdAt": ContactSubmission.created_at,
    "updatedAt": ContactSubmission.updated_at,
}
SEARCH_COLUMNS = (
    ContactSubmission.name,
    ContactSubmission.email,
    ContactSubmission.subject,
    ContactSubmission.description,
)


def list_submissions(db: Session, params: ListParams) -> Tuple[List[ContactSubmission], int]:
    return fetch_page(
        db, select(ContactSubmission), params,
        sort_columns=SORT_COLUMNS, search_columns=SEARCH_COLUMNS, tiebreak=ContactSubmission.id,
    )


def all_submissions(db: Session) -> List[ContactSubmission]:
    stmt = select(ContactSubmission).order_by(ContactSubmission.created_at.asc(), ContactSubmission.id.asc())
    return list(db.execute(stmt).scalars())


def get_submission(db: Session, submission_id: int) -> ContactSubmission:
    return get_or_404(db, ContactSubmission, submission_id, "Contact submission")


def create_submission(db: Session, payload: ContactCreate) -> ContactSubmission:
    # repeat_email only exists to be checked
    submission = ContactSubmission(**payload.model_dump(exclude={"repeat_email"}))
    db.add(submission)
    commit(db)
    db.refresh(submission)
    logger.info("Received contact submission id=%s subject=%r", submission.id, submission.subject)
    return submission


def update_submission(db: Session, submission_id: int, raw: Mapping[str, Any]) -> ContactSubmission:
    submission = get_submission(db, submission_id)
    payload = validate_record(ContactUpdate, raw)
    apply_fields(submission, payload.model_dump())
    submission.touch()
    commit(db)
    db.refresh(submission)
    return submission


def delete_submission(db: Session, submission_id: int) -> DeletedRef:
    submission = get_submission(db, submission_id)
    ref = DeletedRef(id=submission.id, name=submission.name, email=submission.email)
    db.delete(submission)
    commit(db)
    logger.info("Deleted contact submission id=%s", submission_id)
    return ref
