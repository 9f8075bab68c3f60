from __future__ import annotations

import datetime as dt
from typing import List, Literal

from ministry_admin.schemas.common import CamelModel

GrowthType = Literal["members", "ministers", "both"]


class GrowthPoint(CamelModel):
    date: dt.date
    members: int = 0
    ministers: int = 0
    members_cumulative: int = 0
    ministers_cumulative: int = 0
    is_forecast: bool = False


class GrowthSummary(CamelModel):
    total_members: int
    total_ministers: int
    period: str
    forecast_days: int


class GrowthReport(CamelModel):
    type: GrowthType
    days: int
    historical: List[GrowthPoint]
    forecast: List[GrowthPoint]
    summary: GrowthSummary
