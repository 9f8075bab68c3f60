# ministry_admin/models/__init__.py
"""
Central model registry.

Import this once at startup (e.g., in main.py or alembic/env.py) so
SQLAlchemy sees every mapped class before metadata is used.
"""
from ministry_admin.db import Base  # re-export Base

from .church import Church  # noqa: F401
from .church_event import ChurchEvent  # noqa: F401
from .contact import ContactSubmission  # noqa: F401
from .member import Member  # noqa: F401
from .minister import (  # noqa: F401
    Minister,
    MinisterAwardRecognition,
    MinisterCaseReport,
    MinisterChild,
    MinisterEducationBackground,
    MinisterEmergencyContact,
    MinisterEmploymentRecord,
    MinisterMinistryExperience,
    MinisterMinistryRecord,
    MinisterMinistrySkill,
    MinisterSeminarConference,
)
from .ministry_reference import MinistryRank, MinistrySkill  # noqa: F401
from .mixins import CivilStatus, Gender  # noqa: F401
