# ministry_admin/services/analytics.py
"""
Registration growth: daily new members/ministers over a trailing window,
zero-filled, with running totals and a 7-day projection.

Days are bucketed in the configured local zone (``TZ``, default Asia/Manila)
so "today" matches what the admins see on the wall clock.
"""
from __future__ import annotations

import logging
import os
from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ministry_admin.models import Member, Minister
from ministry_admin.schemas.analytics import GrowthPoint, GrowthReport, GrowthSummary

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7
TREND_WINDOW = 7


def local_zone() -> timezone | ZoneInfo:
    name = os.getenv("TZ", "Asia/Manila")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown TZ %r; bucketing growth by UTC", name)
        return timezone.utc


def _aware(ts: datetime) -> datetime:
    # SQLite returns naive values; they were written as UTC
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def _daily_counts(db: Session, column, since: datetime, tz) -> Counter:
    counts: Counter = Counter()
    for (ts,) in db.execute(select(column).where(column >= since)):
        counts[_aware(ts).astimezone(tz).date()] += 1
    return counts


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def growth_report(db: Session, days: int = 30, kind: str = "both", today: Optional[date] = None) -> GrowthReport:
    tz = local_zone()
    if today is None:
        today = datetime.now(tz).date()
    first_day = today - timedelta(days=days - 1)
    since = datetime.combine(first_day, time.min, tzinfo=tz).astimezone(timezone.utc)

    want_members = kind in ("members", "both")
    want_ministers = kind in ("ministers", "both")
    member_counts = _daily_counts(db, Member.created_at, since, tz) if want_members else Counter()
    minister_counts = _daily_counts(db, Minister.created_at, since, tz) if want_ministers else Counter()

    historical: List[GrowthPoint] = []
    running: Dict[str, int] = {"members": 0, "ministers": 0}
    for offset in range(days):
        day = first_day + timedelta(days=offset)
        m, n = member_counts.get(day, 0), minister_counts.get(day, 0)
        running["members"] += m
        running["ministers"] += n
        historical.append(GrowthPoint(
            date=day,
            members=m,
            ministers=n,
            members_cumulative=running["members"],
            ministers_cumulative=running["ministers"],
        ))

    recent = historical[-TREND_WINDOW:]
    member_avg = sum(p.members for p in recent) / len(recent) if recent else 0.0
    minister_avg = sum(p.ministers for p in recent) / len(recent) if recent else 0.0
    per_day_members = _round_half_up(member_avg)
    per_day_ministers = _round_half_up(minister_avg)

    forecast: List[GrowthPoint] = []
    for i in range(1, FORECAST_DAYS + 1):
        running["members"] += per_day_members
        running["ministers"] += per_day_ministers
        forecast.append(GrowthPoint(
            date=today + timedelta(days=i),
            members=per_day_members,
            ministers=per_day_ministers,
            members_cumulative=running["members"],
            ministers_cumulative=running["ministers"],
            is_forecast=True,
        ))

    total_members = db.execute(select(func.count()).select_from(Member)).scalar_one()
    total_ministers = db.execute(select(func.count()).select_from(Minister)).scalar_one()
    return GrowthReport(
        type=kind,
        days=days,
        historical=historical,
        forecast=forecast,
        summary=GrowthSummary(
            total_members=total_members,
            total_ministers=total_ministers,
            period=f"Last {days} days",
            forecast_days=FORECAST_DAYS,
        ),
    )
