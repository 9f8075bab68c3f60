# tests/test_analytics.py
from datetime import date, datetime, timezone

import pytest

from ministry_admin.models import Church, Gender, Member
from ministry_admin.services.analytics import growth_report


@pytest.fixture()
def utc_zone(monkeypatch):
    monkeypatch.setenv("TZ", "UTC")


def _add_members(db, church, *stamps):
    for i, ts in enumerate(stamps):
        db.add(Member(
            church_id=church.id,
            first_name=f"M{i}",
            last_name="Growth",
            gender=Gender.female,
            birthdate=date(1995, 1, 1),
            year_joined=2020,
            created_at=ts,
            updated_at=ts,
        ))
    db.commit()


def test_growth_zero_fill_and_forecast(db_session, utc_zone):
    church = Church(name="Growth Chapel")
    db_session.add(church)
    db_session.commit()
    _add_members(
        db_session, church,
        datetime(2025, 2, 1, 8, tzinfo=timezone.utc),  # outside the window
        datetime(2025, 3, 8, 10, tzinfo=timezone.utc),
        datetime(2025, 3, 8, 23, tzinfo=timezone.utc),
        datetime(2025, 3, 10, 1, tzinfo=timezone.utc),
        datetime(2025, 3, 10, 2, tzinfo=timezone.utc),
    )

    report = growth_report(db_session, days=7, kind="members", today=date(2025, 3, 10))

    assert [p.date for p in report.historical] == [date(2025, 3, d) for d in range(4, 11)]
    assert [p.members for p in report.historical] == [0, 0, 0, 0, 2, 0, 2]
    assert report.historical[-1].members_cumulative == 4
    assert all(p.ministers == 0 for p in report.historical)

    # 4 registrations over 7 days rounds to 1 per day
    assert len(report.forecast) == 7
    assert [p.members for p in report.forecast] == [1] * 7
    assert report.forecast[0].date == date(2025, 3, 11)
    assert report.forecast[-1].members_cumulative == 11
    assert all(p.is_forecast for p in report.forecast)

    assert report.summary.total_members == 5
    assert report.summary.period == "Last 7 days"


def test_growth_buckets_in_local_zone(db_session, monkeypatch):
    monkeypatch.setenv("TZ", "Asia/Manila")
    church = Church(name="Manila Chapel")
    db_session.add(church)
    db_session.commit()
    # 17:30 UTC is already the next day in Manila (+08:00)
    _add_members(db_session, church, datetime(2025, 3, 9, 17, 30, tzinfo=timezone.utc))

    report = growth_report(db_session, days=3, kind="both", today=date(2025, 3, 10))
    assert [(p.date, p.members) for p in report.historical] == [
        (date(2025, 3, 8), 0),
        (date(2025, 3, 9), 0),
        (date(2025, 3, 10), 1),
    ]


def test_growth_endpoint(client, make_church, make_member):
    church = make_church()
    make_member(church["id"])

    r = client.get("/api/analytics/growth", params={"days": 14, "type": "both"})
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["type"] == "both"
    assert len(data["historical"]) == 14
    assert len(data["forecast"]) == 7
    assert data["summary"]["totalMembers"] == 1

    r = client.get("/api/analytics/growth", params={"days": 0})
    assert r.status_code == 400, r.text
    r = client.get("/api/analytics/growth", params={"type": "donations"})
    assert r.status_code == 400, r.text
