"""CRUD for the ministry rank and ministry skill lookup tables."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from ministry_admin.models import MinisterMinistryExperience, MinisterMinistrySkill, MinistryRank, MinistrySkill
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.schemas.ministry_reference import MinistryRankUpdate, MinistrySkillUpdate
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


class ReferenceTable:
    """One lookup table plus the minister rows that point at it."""

    def __init__(
        self,
        model: Type[Any],
        label: str,
        update_schema: Type[BaseModel],
        referrer: Type[Any],
        referrer_column: str,
        referrer_kind: str,
    ) -> None:
        self.model = model
        self.label = label
        self.update_schema = update_schema
        self.referrer = referrer
        self.referrer_column = referrer_column
        self.referrer_kind = referrer_kind
        self.duplicate_message = f"A {label.lower()} with this name already exists."
        self.sort_columns = {
            "id": model.id,
            "name": model.name,
            "createdAt": model.created_at,
            "updatedAt": model.updated_at,
        }

    def list(self, db: Session, params: ListParams) -> Tuple[List[Any], int]:
        return fetch_page(
            db, select(self.model), params,
            sort_columns=self.sort_columns,
            search_columns=(self.model.name, self.model.description),
            tiebreak=self.model.id,
        )

    def all(self, db: Session) -> List[Any]:
        stmt = select(self.model).order_by(self.model.created_at.asc(), self.model.id.asc())
        return list(db.execute(stmt).scalars())

    def get(self, db: Session, obj_id: int) -> Any:
        return get_or_404(db, self.model, obj_id, self.label)

    def create(self, db: Session, payload: BaseModel) -> Any:
        obj = self.model(**payload.model_dump())
        db.add(obj)
        commit(db, self.duplicate_message)
        db.refresh(obj)
        logger.info("Created %s id=%s name=%r", self.label, obj.id, obj.name)
        return obj

    def update(self, db: Session, obj_id: int, raw: Mapping[str, Any]) -> Any:
        obj = self.get(db, obj_id)
        payload = validate_record(self.update_schema, raw)
        apply_fields(obj, payload.model_dump())
        obj.touch()
        commit(db, self.duplicate_message)
        db.refresh(obj)
        logger.info("Updated %s id=%s", self.label, obj.id)
        return obj

    def delete(self, db: Session, obj_id: int) -> DeletedRef:
        obj = self.get(db, obj_id)
        column = getattr(self.referrer, self.referrer_column)
        raise_if_referenced(db, self.label.lower(), {
            self.referrer_kind: (self.referrer, column == obj_id),
        })
        ref = DeletedRef(id=obj.id, name=obj.name)
        db.delete(obj)
        commit(db)
        logger.info("Deleted %s id=%s", self.label, obj_id)
        return ref


ranks = ReferenceTable(
    MinistryRank, "Ministry rank", MinistryRankUpdate,
    MinisterMinistryExperience, "ministry_rank_id", "ministry experiences",
)
skills = ReferenceTable(
    MinistrySkill, "Ministry skill", MinistrySkillUpdate,
    MinisterMinistrySkill, "ministry_skill_id", "minister skill links",
)
