from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ministry_admin.api.auth import require_admin
from ministry_admin.db import get_db
from ministry_admin.schemas.analytics import GrowthReport, GrowthType
from ministry_admin.schemas.common import DataResponse
from ministry_admin.services.analytics import growth_report

router = APIRouter(prefix="/api/analytics", tags=["Analytics"], dependencies=[Depends(require_admin)])


@router.get("/growth", response_model=DataResponse[GrowthReport])
def growth(
    days: int = Query(30, ge=1, le=365),
    type: GrowthType = Query("both"),
    db: Session = Depends(get_db),
):
    """Daily registrations over the trailing window plus a 7-day projection."""
    return DataResponse(data=growth_report(db, days=days, kind=type))
