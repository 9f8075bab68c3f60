# backend/scripts/seed_reference_data.py
"""
Seed the lookup tables a fresh install needs: ministry ranks, ministry skills
and one sample church. Safe to run repeatedly; rows are matched by name and
only missing ones are inserted.

Usage (from repo root):
  python backend/scripts/seed_reference_data.py --dry-run
  python backend/scripts/seed_reference_data.py --db-url sqlite:///./ministry_admin.db
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Tuple

# -----------------------------------------------------------------------------
# Paths & import setup (so "import ministry_admin" works regardless of CWD)
# -----------------------------------------------------------------------------
HERE = Path(__file__).resolve()
BACKEND_ROOT = HERE.parents[1]          # .../backend

if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from sqlalchemy import select  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from ministry_admin.db import DATABASE_URL, make_engine  # noqa: E402
from ministry_admin.models import Church, MinistryRank, MinistrySkill  # noqa: E402

logger = logging.getLogger("seed_reference_data")

RANKS: Tuple[Tuple[str, str], ...] = (
    ("Senior Pastor", "Leads the congregation and the pastoral team"),
    ("Associate Pastor", "Assists the senior pastor across ministries"),
    ("Elder", "Provides spiritual oversight and counsel"),
    ("Deacon", "Serves the practical needs of the church"),
    ("Evangelist", "Leads outreach and mission work"),
    ("Lifegroup Leader", "Shepherds a small group"),
)

SKILLS: Tuple[Tuple[str, str], ...] = (
    ("Preaching", "Delivering sermons and expository teaching"),
    ("Worship Leading", "Leading congregational worship"),
    ("Counseling", "Pastoral and family counseling"),
    ("Music", "Instrumental or vocal ministry"),
    ("Teaching", "Bible study and Sunday school"),
    ("Administration", "Church operations and records"),
    ("Media", "Audio, video and livestream production"),
)

SAMPLE_CHURCH = {
    "name": "Main Sanctuary",
    "address": "123 Rizal Avenue, Quezon City, Metro Manila",
    "email": "office@example.org",
    "latitude": "14.6760",
    "longitude": "121.0437",
    "description": "Primary worship location and administrative office.",
}


def _upsert_named(db: Session, model, rows: Iterable[Tuple[str, str]]) -> int:
    existing = set(db.execute(select(model.name)).scalars())
    added = 0
    for name, description in rows:
        if name in existing:
            continue
        db.add(model(name=name, description=description))
        added += 1
    return added


def seed(db: Session, with_church: bool = True) -> dict:
    counts = {
        "ministry_ranks": _upsert_named(db, MinistryRank, RANKS),
        "ministry_skills": _upsert_named(db, MinistrySkill, SKILLS),
        "churches": 0,
    }
    if with_church:
        found = db.execute(select(Church.id).where(Church.name == SAMPLE_CHURCH["name"])).first()
        if not found:
            db.add(Church(**SAMPLE_CHURCH))
            counts["churches"] = 1
    return counts


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed ministry ranks, skills and a sample church.")
    parser.add_argument("--db-url", dest="db_url", default=DATABASE_URL, help="SQLAlchemy URL (default: DATABASE_URL)")
    parser.add_argument("--no-church", dest="no_church", action="store_true", help="Skip the sample church")
    parser.add_argument("--dry-run", dest="dry_run", action="store_true", help="Report what would be inserted")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    engine = make_engine(args.db_url)
    Session_ = sessionmaker(bind=engine, autoflush=False)
    with Session_() as db:
        counts = seed(db, with_church=not args.no_church)
        if args.dry_run:
            db.rollback()
            logger.info("Dry run; would insert %s", counts)
        else:
            db.commit()
            logger.info("Inserted %s", counts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
