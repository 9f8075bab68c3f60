# ministry_admin/api/system.py
from __future__ import annotations

import logging
import os
from datetime import datetime

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ministry_admin import __version__
from ministry_admin.db import DATABASE_URL, engine
from ministry_admin.services.analytics import local_zone

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ops"])


def _db_driver_from_url(url: str | None) -> str | None:
    if not url or "://" not in url:
        return None
    scheme = url.split("://", 1)[0]  # e.g., "postgresql+psycopg2"
    if "+" in scheme:
        return scheme.split("+", 1)[1]  # "psycopg2"
    return scheme


@router.get("/health")
def health():
    """Liveness check with a lightweight DB probe and local time."""
    zone = local_zone()
    tz = str(zone)
    now_local = datetime.now(zone).isoformat()

    db = {"status": "ok", "driver": _db_driver_from_url(DATABASE_URL)}
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Health DB probe failed: %s", type(e).__name__)
        db["status"] = f"error: {type(e).__name__}"

    return {
        "status": "ok",
        "time": {"tz": tz, "now": now_local},
        "db": db,
    }


@router.get("/version")
def version():
    """Minimal runtime info; confirms DB driver for the UI."""
    return {
        "app": os.getenv("APP_NAME", "Ministry Admin Backend"),
        "version": __version__,
        "db_driver": _db_driver_from_url(DATABASE_URL),
        "tz": os.getenv("TZ", "Asia/Manila"),
    }
