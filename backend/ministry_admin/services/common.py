# ministry_admin/services/common.py
"""
Helpers shared by every record service: existence and reference checks,
paginated listing, IntegrityError classification and delete blockers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ministry_admin.errors import (
    ApiError,
    BadRequest,
    Conflict,
    DeleteBlocked,
    FieldError,
    InternalError,
    NotFound,
)

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


@dataclass
class ListParams:
    page: int = 1
    limit: int = 10
    search: Optional[str] = None
    sort_by: str = "createdAt"
    sort_order: str = "desc"
    is_active: Optional[bool] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def term(self) -> Optional[str]:
        s = (self.search or "").strip()
        return s or None


# ---- Lookups --------------------------------------------------------------------

def get_or_404(db: Session, model: Type[Any], obj_id: int, label: str) -> Any:
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFound(label, obj_id)
    return obj


def check_references(db: Session, refs: Iterable[Tuple[str, Type[Any], Optional[int], str]]) -> None:
    """Verify referenced rows exist before any write.

    ``refs`` yields ``(field_path, model, id, label)``; ``None`` ids are skipped.
    Every missing reference is reported, not only the first.
    """
    missing: List[FieldError] = []
    seen: Dict[Tuple[Type[Any], int], bool] = {}
    for field, model, ref_id, label in refs:
        if ref_id is None:
            continue
        key = (model, ref_id)
        if key not in seen:
            seen[key] = db.get(model, ref_id) is not None
        if not seen[key]:
            missing.append(FieldError(field=field, message=f"{label} {ref_id} does not exist"))
    if missing:
        raise BadRequest("Referenced record does not exist", error="Invalid reference", details=missing)


def raise_if_referenced(
    db: Session, entity: str, checks: Mapping[str, Tuple[Type[Any], ColumnElement[bool]]]
) -> None:
    """Refuse deletion while other rows still point at the target.

    ``checks`` maps a plural kind ("members") to the referencing model and
    the WHERE clause selecting its rows.
    """
    blockers: Dict[str, int] = {}
    for kind, (model, clause) in checks.items():
        n = db.execute(select(func.count()).select_from(model).where(clause)).scalar_one()
        if n:
            blockers[kind] = int(n)
    if blockers:
        logger.info("Delete of %s blocked: %s", entity, blockers)
        raise DeleteBlocked(entity, blockers)


# ---- Listing --------------------------------------------------------------------

LIKE_ESCAPE = "\\"


def icontains(column: Any, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match; `%`, `_` and `\\` in ``term`` are literal."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return column.ilike(f"%{escaped}%", escape=LIKE_ESCAPE)


def fetch_page(
    db: Session,
    stmt: Select,
    params: ListParams,
    *,
    sort_columns: Mapping[str, Any],
    search_columns: Sequence[Any] = (),
    active_column: Any = None,
    tiebreak: Any = None,
) -> Tuple[List[Any], int]:
    """Apply search/filter/sort/paging to ``stmt``; return (rows, total)."""
    column = sort_columns.get(params.sort_by)
    if column is None:
        allowed = ", ".join(sorted(sort_columns))
        raise BadRequest(
            f"Cannot sort by '{params.sort_by}'",
            error="Validation failed",
            details=[FieldError(field="sortBy", message=f"Must be one of: {allowed}")],
        )

    term = params.term
    if term and search_columns:
        stmt = stmt.where(or_(*[icontains(c, term) for c in search_columns]))
    if params.is_active is not None and active_column is not None:
        stmt = stmt.where(active_column == params.is_active)

    total = db.execute(select(func.count()).select_from(stmt.order_by(None).subquery())).scalar_one()

    ordering = [column.desc() if params.sort_order == "desc" else column.asc()]
    if tiebreak is not None:
        ordering.append(tiebreak.desc() if params.sort_order == "desc" else tiebreak.asc())
    page_stmt = stmt.order_by(*ordering).offset(params.offset).limit(params.limit)
    rows = list(db.execute(page_stmt).scalars().all())
    return rows, int(total)


# ---- Writes ---------------------------------------------------------------------

def apply_fields(obj: Any, values: Mapping[str, Any]) -> None:
    for key, value in values.items():
        setattr(obj, key, value)


def integrity_error(exc: IntegrityError, duplicate_message: str) -> ApiError:
    """Map a driver IntegrityError onto 409 / 400 / opaque 500."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None)
    text = str(orig or exc)
    if code == "23505" or "UNIQUE constraint failed" in text:
        return Conflict(duplicate_message)
    if code == "23503" or "FOREIGN KEY constraint failed" in text:
        return BadRequest("Referenced record does not exist", error="Invalid reference")
    logger.error("Unclassified integrity error: %s", text)
    return InternalError()


def commit(db: Session, duplicate_message: str = "Record already exists") -> None:
    """Commit the unit of work; roll back and translate on failure."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise integrity_error(exc, duplicate_message) from exc
    except Exception:
        db.rollback()
        raise
