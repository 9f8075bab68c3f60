from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ministry_admin.models import Church, ChurchEvent, Member, Minister, MinisterMinistryRecord
from ministry_admin.schemas.church import ChurchCreate, ChurchStats, ChurchUpdate
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.services.common import (
    ListParams,
    apply_fields,
    commit,
    fetch_page,
    get_or_404,
    raise_if_referenced,
)
from ministry_admin.validation import validate_record

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A church with this name already exists."

SORT_COLUMNS = {
    "id": Church.id,
    "name": Church.name,
    "address": Church.address,
    "email": Church.email,
    "createdAt": Church.created_at,
    "updatedAt": Church.updated_at,
}
SEARCH_COLUMNS = (Church.name, Church.address, Church.email, Church.description)


def list_churches(db: Session, params: ListParams) -> Tuple[List[Church], int]:
    return fetch_page(
        db, select(Church), params,
        sort_columns=SORT_COLUMNS, search_columns=SEARCH_COLUMNS, tiebreak=Church.id,
    )


def all_churches(db: Session) -> List[Church]:
    return list(db.execute(select(Church).order_by(Church.created_at.asc(), Church.id.asc())).scalars())


def get_church(db: Session, church_id: int) -> Church:
    return get_or_404(db, Church, church_id, "Church")


def create_church(db: Session, payload: ChurchCreate) -> Church:
    church = Church(**payload.model_dump())
    db.add(church)
    commit(db, DUPLICATE_NAME)
    db.refresh(church)
    logger.info("Created church id=%s name=%r", church.id, church.name)
    return church


def update_church(db: Session, church_id: int, raw: Mapping[str, Any]) -> Church:
    church = get_church(db, church_id)
    payload = validate_record(ChurchUpdate, raw)
    apply_fields(church, payload.model_dump())
    church.touch()
    commit(db, DUPLICATE_NAME)
    db.refresh(church)
    logger.info("Updated church id=%s", church.id)
    return church


def delete_church(db: Session, church_id: int) -> DeletedRef:
    church = get_church(db, church_id)
    raise_if_referenced(db, "church", {
        "members": (Member, Member.church_id == church_id),
        "ministers": (Minister, Minister.church_id == church_id),
        "ministry records": (MinisterMinistryRecord, MinisterMinistryRecord.church_location_id == church_id),
        "church events": (ChurchEvent, ChurchEvent.church_id == church_id),
    })
    ref = DeletedRef(id=church.id, name=church.name, email=church.email)
    db.delete(church)
    commit(db)
    logger.info("Deleted church id=%s", church_id)
    return ref


def church_stats(db: Session, church_id: int) -> ChurchStats:
    church = get_church(db, church_id)
    members = db.execute(
        select(func.count()).select_from(Member).where(Member.church_id == church_id)
    ).scalar_one()
    ministers = db.execute(
        select(func.count()).select_from(Minister).where(Minister.church_id == church_id)
    ).scalar_one()
    return ChurchStats(
        church_id=church.id,
        church_name=church.name,
        member_count=members,
        minister_count=ministers,
        total=members + ministers,
    )
