from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from ministry_admin.models import Church, ChurchEvent
from ministry_admin.schemas.church_event import ChurchEventCreate, ChurchEventUpdate
from ministry_admin.schemas.common import DeletedRef
from ministry_admin.services.common import (
    ListParams,
    apply_fields,
    check_references,
    commit,
    fetch_page,
    get_or_404,
)
from ministry_admin.validation import validate_record

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "id": ChurchEvent.id,
    "name": ChurchEvent.name,
    "place": ChurchEvent.place,
    "datetime": ChurchEvent.datetime,
    "createdAt": ChurchEvent.created_at,
    "updatedAt": ChurchEvent.updated_at,
}
SEARCH_COLUMNS = (ChurchEvent.name, ChurchEvent.description, ChurchEvent.place)


def _refs(church_id: Optional[int]):
    return [("churchId", Church, church_id, "Church")]


def list_events(db: Session, params: ListParams) -> Tuple[List[ChurchEvent], int]:
    return fetch_page(
        db, select(ChurchEvent), params,
        sort_columns=SORT_COLUMNS, search_columns=SEARCH_COLUMNS, tiebreak=ChurchEvent.id,
    )


def get_event(db: Session, event_id: int) -> ChurchEvent:
    return get_or_404(db, ChurchEvent, event_id, "Church event")


def create_event(db: Session, payload: ChurchEventCreate) -> ChurchEvent:
    check_references(db, _refs(payload.church_id))
    event = ChurchEvent(**payload.model_dump())
    db.add(event)
    commit(db)
    db.refresh(event)
    logger.info("Created church event id=%s at %s", event.id, event.datetime)
    return event


def update_event(db: Session, event_id: int, raw: Mapping[str, Any]) -> ChurchEvent:
    event = get_event(db, event_id)
    payload = validate_record(ChurchEventUpdate, raw)
    check_references(db, _refs(payload.church_id))
    apply_fields(event, payload.model_dump())
    event.touch()
    commit(db)
    db.refresh(event)
    logger.info("Updated church event id=%s", event.id)
    return event


def delete_event(db: Session, event_id: int) -> DeletedRef:
    event = get_event(db, event_id)
    ref = DeletedRef(id=event.id, name=event.name)
    db.delete(event)
    commit(db)
    logger.info("Deleted church event id=%s", event_id)
    return ref
