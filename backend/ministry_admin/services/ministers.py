# ministry_admin/services/ministers.py
"""
Minister records and their dependent collections.

A minister is written together with every nested collection in one unit of
work: the parent row is flushed to obtain its id, each non-empty collection is
inserted with that id attached, and a single commit closes the transaction.
Any failure rolls the whole unit back, so no orphan rows survive.

Collections are described once in ``COLLECTIONS``; the per-collection
endpoints (``/api/ministers/{id}/{slug}``) and the cascade on delete both
read from that table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry_admin.errors import BadRequest, FieldError, NotFound
from ministry_admin.models import (
    Church,
    Minister,
    MinisterAwardRecognition,
    MinisterCaseReport,
    MinisterChild,
    MinisterEducationBackground,
    MinisterEmergencyContact,
    MinisterEmploymentRecord,
    MinisterMinistryExperience,
    MinisterMinistryRecord,
    MinisterMinistrySkill,
    MinisterSeminarConference,
    MinistryRank,
    MinistrySkill,
)
from ministry_admin.schemas import minister as s
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.services.common import (
    ListParams,
    apply_fields,
    check_references,
    commit,
    fetch_page,
    get_or_404,
    icontains,
    integrity_error,
)
from ministry_admin.validation import validate_record

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20


@dataclass(frozen=True)
class Ref:
    attr: str
    model: Type[Any]
    label: str


@dataclass(frozen=True)
class Collection:
    key: str  # attribute on MinisterCreate / MinisterDetails
    slug: str  # URL segment
    model: Type[Any]
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    refs: Tuple[Ref, ...] = ()

    @property
    def json_key(self) -> str:
        return to_camel(self.key)


COLLECTIONS: Tuple[Collection, ...] = (
    Collection("children", "children", MinisterChild, s.ChildCreate, s.ChildRead),
    Collection(
        "emergency_contacts", "emergency-contacts", MinisterEmergencyContact,
        s.EmergencyContactCreate, s.EmergencyContactRead,
    ),
    Collection(
        "education_backgrounds", "education-backgrounds", MinisterEducationBackground,
        s.EducationBackgroundCreate, s.EducationBackgroundRead,
    ),
    Collection(
        "ministry_experiences", "ministry-experiences", MinisterMinistryExperience,
        s.MinistryExperienceCreate, s.MinistryExperienceRead,
        refs=(Ref("ministry_rank_id", MinistryRank, "Ministry rank"),),
    ),
    Collection(
        "ministry_skills", "ministry-skills", MinisterMinistrySkill,
        s.MinistrySkillLinkCreate, s.MinistrySkillLinkRead,
        refs=(Ref("ministry_skill_id", MinistrySkill, "Ministry skill"),),
    ),
    Collection(
        "ministry_records", "ministry-records", MinisterMinistryRecord,
        s.MinistryRecordCreate, s.MinistryRecordRead,
        refs=(Ref("church_location_id", Church, "Church"),),
    ),
    Collection(
        "awards_recognitions", "awards-recognitions", MinisterAwardRecognition,
        s.AwardRecognitionCreate, s.AwardRecognitionRead,
    ),
    Collection(
        "employment_records", "employment-records", MinisterEmploymentRecord,
        s.EmploymentRecordCreate, s.EmploymentRecordRead,
    ),
    Collection(
        "seminars_conferences", "seminars-conferences", MinisterSeminarConference,
        s.SeminarConferenceCreate, s.SeminarConferenceRead,
    ),
    Collection(
        "case_reports", "case-reports", MinisterCaseReport,
        s.CaseReportCreate, s.CaseReportRead,
    ),
)
BY_SLUG: Dict[str, Collection] = {c.slug: c for c in COLLECTIONS}
COLLECTION_KEYS = frozenset(c.key for c in COLLECTIONS)

SORT_COLUMNS = {
    "id": Minister.id,
    "firstName": Minister.first_name,
    "lastName": Minister.last_name,
    "email": Minister.email,
    "dateOfBirth": Minister.date_of_birth,
    "civilStatus": Minister.civil_status,
    "createdAt": Minister.created_at,
    "updatedAt": Minister.updated_at,
}
SEARCH_COLUMNS = (
    Minister.first_name,
    Minister.last_name,
    Minister.middle_name,
    Minister.nickname,
    Minister.email,
    Minister.telephone,
    Minister.present_address,
)


def collection_for(slug: str) -> Collection:
    try:
        return BY_SLUG[slug]
    except KeyError:
        raise NotFound("Collection", slug) from None


# ---- Reference checks -----------------------------------------------------------

def _item_refs(coll: Collection, item: BaseModel, prefix: str = "") -> Iterator[Tuple[str, Type[Any], Any, str]]:
    for ref in coll.refs:
        yield f"{prefix}{to_camel(ref.attr)}", ref.model, getattr(item, ref.attr), ref.label


def _create_refs(payload: s.MinisterCreate) -> Iterator[Tuple[str, Type[Any], Any, str]]:
    yield "churchId", Church, payload.church_id, "Church"
    for coll in COLLECTIONS:
        if not coll.refs:
            continue
        for i, item in enumerate(getattr(payload, coll.key)):
            yield from _item_refs(coll, item, f"{coll.json_key}.{i}.")


# ---- Parent record --------------------------------------------------------------

def list_ministers(
    db: Session, params: ListParams, church_id: Optional[int] = None
) -> Tuple[List[Minister], int]:
    stmt = select(Minister)
    if church_id is not None:
        get_or_404(db, Church, church_id, "Church")
        stmt = stmt.where(Minister.church_id == church_id)
    return fetch_page(
        db, stmt, params,
        sort_columns=SORT_COLUMNS,
        search_columns=SEARCH_COLUMNS,
        active_column=Minister.is_active,
        tiebreak=Minister.id,
    )


def all_ministers(db: Session, church_id: Optional[int] = None) -> List[Tuple[Minister, Optional[str]]]:
    stmt = select(Minister, Church.name).join(Church, Church.id == Minister.church_id, isouter=True)
    if church_id is not None:
        get_or_404(db, Church, church_id, "Church")
        stmt = stmt.where(Minister.church_id == church_id)
    stmt = stmt.order_by(Minister.created_at.asc(), Minister.id.asc())
    return [(m, name) for m, name in db.execute(stmt).all()]


def get_minister(db: Session, minister_id: int) -> Minister:
    return get_or_404(db, Minister, minister_id, "Minister")


def _insert_collection(db: Session, coll: Collection, minister_id: int, items: Sequence[BaseModel]) -> int:
    rows = [coll.model(minister_id=minister_id, **item.model_dump()) for item in items]
    db.add_all(rows)
    db.flush()
    return len(rows)


def create_minister(db: Session, payload: s.MinisterCreate) -> Tuple[Minister, Dict[str, int]]:
    """Insert a minister and all nested collections atomically.

    Returns the stored parent row and the number of rows written per
    collection (keyed by JSON collection name).
    """
    check_references(db, _create_refs(payload))

    minister = Minister(**payload.model_dump(exclude=set(COLLECTION_KEYS)))
    counts: Dict[str, int] = {}
    try:
        db.add(minister)
        db.flush()
        for coll in COLLECTIONS:
            items = getattr(payload, coll.key)
            counts[coll.json_key] = _insert_collection(db, coll, minister.id, items) if items else 0
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise integrity_error(exc, "Minister already exists") from exc
    except Exception:
        db.rollback()
        logger.warning("Minister create rolled back")
        raise

    db.refresh(minister)
    logger.info("Created minister id=%s with %s", minister.id, counts)
    return minister, counts


def get_minister_details(db: Session, minister_id: int) -> s.MinisterDetails:
    """Parent plus every collection, read in the session's single transaction."""
    minister = get_minister(db, minister_id)
    data = s.MinisterRead.model_validate(minister).model_dump()
    for coll in COLLECTIONS:
        rows = db.execute(
            select(coll.model).where(coll.model.minister_id == minister_id).order_by(coll.model.id)
        ).scalars()
        data[coll.key] = [coll.read_schema.model_validate(r) for r in rows]
    return s.MinisterDetails(**data)


def update_minister(db: Session, minister_id: int, raw: Mapping[str, Any]) -> Minister:
    minister = get_minister(db, minister_id)
    payload = validate_record(s.MinisterUpdate, raw)
    check_references(db, [("churchId", Church, payload.church_id, "Church")])
    apply_fields(minister, payload.model_dump())
    minister.touch()
    commit(db)
    db.refresh(minister)
    logger.info("Updated minister id=%s", minister.id)
    return minister


def delete_minister(db: Session, minister_id: int) -> DeletedRef:
    """Delete the minister and every owned collection row in one transaction."""
    minister = get_minister(db, minister_id)
    ref = DeletedRef(id=minister.id, name=f"{minister.first_name} {minister.last_name}", email=minister.email)
    try:
        for coll in COLLECTIONS:
            db.execute(delete(coll.model).where(coll.model.minister_id == minister_id))
        db.delete(minister)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Deleted minister id=%s with all collections", minister_id)
    return ref


def search_ministers(db: Session, q: Optional[str]) -> List[s.MinisterSearchHit]:
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
            icontains(Minister.first_name, word),
            icontains(Minister.last_name, word),
            icontains(Minister.middle_name, word),
            icontains(Minister.nickname, word),
        ]
    middle = func.coalesce(Minister.middle_name, "")
    conditions += [
        icontains(Minister.first_name + " " + middle + " " + Minister.last_name, query),
        icontains(Minister.first_name + " " + Minister.last_name, query),
        icontains(Minister.last_name + ", " + Minister.first_name, query),
    ]
    stmt = (
        select(Minister, Church.name)
        .join(Church, Church.id == Minister.church_id, isouter=True)
        .where(or_(*conditions))
        .order_by(Minister.first_name, Minister.last_name, Minister.id)
        .limit(SEARCH_LIMIT)
    )
    hits = []
    for minister, church_name in db.execute(stmt).all():
        hit = s.MinisterSearchHit.model_validate(minister)
        hit.church_name = church_name
        hits.append(hit)
    return hits


# ---- Per-collection operations --------------------------------------------------

def _get_row(db: Session, coll: Collection, minister_id: int, row_id: int) -> Any:
    row = db.get(coll.model, row_id)
    if row is None or row.minister_id != minister_id:
        raise NotFound(coll.model.__name__.replace("Minister", "", 1) or "Row", row_id)
    return row


def list_collection(db: Session, minister_id: int, slug: str) -> List[BaseModel]:
    coll = collection_for(slug)
    get_minister(db, minister_id)
    rows = db.execute(
        select(coll.model).where(coll.model.minister_id == minister_id).order_by(coll.model.id)
    ).scalars()
    return [coll.read_schema.model_validate(r) for r in rows]


def add_collection_row(db: Session, minister_id: int, slug: str, raw: Mapping[str, Any]) -> BaseModel:
    coll = collection_for(slug)
    minister = get_minister(db, minister_id)
    item = validate_record(coll.create_schema, raw)
    check_references(db, _item_refs(coll, item))

    row = coll.model(minister_id=minister_id, **item.model_dump())
    db.add(row)
    minister.touch()
    commit(db)
    db.refresh(row)
    logger.info("Added %s row id=%s to minister id=%s", slug, row.id, minister_id)
    return coll.read_schema.model_validate(row)


def update_collection_row(
    db: Session, minister_id: int, slug: str, row_id: int, raw: Mapping[str, Any]
) -> BaseModel:
    coll = collection_for(slug)
    minister = get_minister(db, minister_id)
    row = _get_row(db, coll, minister_id, row_id)
    item = validate_record(coll.create_schema, raw)
    check_references(db, _item_refs(coll, item))

    apply_fields(row, item.model_dump())
    row.touch()
    minister.touch()
    commit(db)
    db.refresh(row)
    logger.info("Updated %s row id=%s of minister id=%s", slug, row_id, minister_id)
    return coll.read_schema.model_validate(row)


def delete_collection_row(db: Session, minister_id: int, slug: str, row_id: int) -> DeletedRef:
    coll = collection_for(slug)
    minister = get_minister(db, minister_id)
    row = _get_row(db, coll, minister_id, row_id)
    db.delete(row)
    minister.touch()
    commit(db)
    logger.info("Deleted %s row id=%s of minister id=%s", slug, row_id, minister_id)
    return DeletedRef(id=row_id)
