# ministry_admin/services/members.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from ministry_admin.db import utcnow
from ministry_admin.errors import BadRequest, FieldError
from ministry_admin.models import Church, Member
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.schemas.member import (
    MemberBase,
    MemberCreate,
    MemberSearchHit,
    MemberUpdate,
    RecentMember,
)
from ministry_admin.services.common import (
    ListParams,
    apply_fields,
    check_references,
    commit,
    fetch_page,
    get_or_404,
    icontains,
    raise_if_referenced,
)
from ministry_admin.validation import validate_record

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20
RECENT_DAYS = 31
RECENT_LIMIT = 50

SORT_COLUMNS = {
    "id": Member.id,
    "firstName": Member.first_name,
    "lastName": Member.last_name,
    "email": Member.email,
    "occupation": Member.occupation,
    "yearJoined": Member.year_joined,
    "birthdate": Member.birthdate,
    "createdAt": Member.created_at,
    "updatedAt": Member.updated_at,
}
SEARCH_COLUMNS = (
    Member.first_name,
    Member.last_name,
    Member.middle_name,
    Member.email,
    Member.occupation,
    Member.mobile_number,
)


def _references(payload: MemberBase, member_id: Optional[int] = None):
    yield "churchId", Church, payload.church_id, "Church"
    leader = payload.lifegroup_leader_id
    if leader is not None and leader == member_id:
        raise BadRequest(
            "A member cannot be their own lifegroup leader",
            error="Validation failed",
            details=[FieldError(field="lifegroupLeaderId", message="Must reference another member")],
        )
    yield "lifegroupLeaderId", Member, leader, "Member"


def list_members(
    db: Session, params: ListParams, church_id: Optional[int] = None
) -> Tuple[List[Member], int]:
    stmt = select(Member)
    if church_id is not None:
        get_or_404(db, Church, church_id, "Church")
        stmt = stmt.where(Member.church_id == church_id)
    return fetch_page(
        db, stmt, params,
        sort_columns=SORT_COLUMNS,
        search_columns=SEARCH_COLUMNS,
        active_column=Member.is_active,
        tiebreak=Member.id,
    )


def all_members(db: Session, church_id: Optional[int] = None) -> List[Tuple[Member, Optional[str]]]:
    """Every member with its church name, oldest first (export order)."""
    stmt = select(Member, Church.name).join(Church, Church.id == Member.church_id, isouter=True)
    if church_id is not None:
        get_or_404(db, Church, church_id, "Church")
        stmt = stmt.where(Member.church_id == church_id)
    stmt = stmt.order_by(Member.created_at.asc(), Member.id.asc())
    return [(m, name) for m, name in db.execute(stmt).all()]


def get_member(db: Session, member_id: int) -> Member:
    return get_or_404(db, Member, member_id, "Member")


def create_member(db: Session, payload: MemberCreate) -> Member:
    check_references(db, _references(payload))
    member = Member(**payload.model_dump())
    db.add(member)
    commit(db)
    db.refresh(member)
    logger.info("Created member id=%s church_id=%s", member.id, member.church_id)
    return member


def update_member(db: Session, member_id: int, raw: Mapping[str, Any]) -> Member:
    member = get_member(db, member_id)
    payload = validate_record(MemberUpdate, raw)
    check_references(db, _references(payload, member_id))
    apply_fields(member, payload.model_dump())
    member.touch()
    commit(db)
    db.refresh(member)
    logger.info("Updated member id=%s", member.id)
    return member


def delete_member(db: Session, member_id: int) -> DeletedRef:
    member = get_member(db, member_id)
    raise_if_referenced(db, "member", {
        "lifegroup members": (Member, Member.lifegroup_leader_id == member_id),
    })
    ref = DeletedRef(id=member.id, name=f"{member.first_name} {member.last_name}", email=member.email)
    db.delete(member)
    commit(db)
    logger.info("Deleted member id=%s", member_id)
    return ref


def search_members(db: Session, q: Optional[str]) -> List[MemberSearchHit]:
    """Quick name lookup: any word in any name part, or a full-name match."""
    query = (q or "").strip()
    if len(query) < 2:
        raise BadRequest(
            "Query must be at least 2 characters long",
            error="Validation failed",
            details=[FieldError(field="q", message="Must be at least 2 characters")],
        )
    conditions = []
    for word in query.split():
        conditions += [
            icontains(Member.first_name, word),
            icontains(Member.last_name, word),
            icontains(Member.middle_name, word),
        ]
    middle = func.coalesce(Member.middle_name, "")
    conditions += [
        icontains(Member.first_name + " " + middle + " " + Member.last_name, query),
        icontains(Member.first_name + " " + Member.last_name, query),
        icontains(Member.last_name + ", " + Member.first_name, query),
    ]
    stmt = (
        select(Member, Church.name)
        .join(Church, Church.id == Member.church_id, isouter=True)
        .where(or_(*conditions))
        .order_by(Member.first_name, Member.last_name, Member.id)
        .limit(SEARCH_LIMIT)
    )
    hits = []
    for member, church_name in db.execute(stmt).all():
        hit = MemberSearchHit.model_validate(member)
        hit.church_name = church_name
        hits.append(hit)
    return hits


def recent_members(db: Session) -> List[RecentMember]:
    since = utcnow() - timedelta(days=RECENT_DAYS)
    stmt = (
        select(Member, Church.name)
        .join(Church, Church.id == Member.church_id, isouter=True)
        .where(Member.created_at >= since)
        .order_by(Member.created_at.desc(), Member.id.desc())
        .limit(RECENT_LIMIT)
    )
    out = []
    for member, church_name in db.execute(stmt).all():
        row = RecentMember.model_validate(member)
        row.church_name = church_name
        out.append(row)
    return out
