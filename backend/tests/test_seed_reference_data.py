# tests/test_seed_reference_data.py
import importlib.util
from pathlib import Path

from sqlalchemy import func, select

from ministry_admin.models import Church, MinistryRank, MinistrySkill

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_reference_data.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_reference_data", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_seed_is_idempotent(db_session):
    seed = _load_script()
    db_session.add(MinistryRank(name="Elder"))
    db_session.commit()

    counts = seed.seed(db_session)
    db_session.commit()
    assert counts["ministry_ranks"] == len(seed.RANKS) - 1
    assert counts["ministry_skills"] == len(seed.SKILLS)
    assert counts["churches"] == 1

    again = seed.seed(db_session)
    db_session.commit()
    assert again == {"ministry_ranks": 0, "ministry_skills": 0, "churches": 0}
    assert _count(db_session, MinistryRank) == len(seed.RANKS)
    assert _count(db_session, MinistrySkill) == len(seed.SKILLS)
    assert _count(db_session, Church) == 1
