import enum
from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import utcnow


class Gender(str, enum.Enum):
    male = "male"
    female = "female"


class CivilStatus(str, enum.Enum):
    single = "single"
    married = "married"
    widowed = "widowed"
    separated = "separated"
    divorced = "divorced"


def enum_column(enum_cls: type[enum.Enum], name: str) -> Enum:
    # VARCHAR storage keeps SQLite and PostgreSQL migrations identical
    return Enum(enum_cls, name=name, native_enum=False, length=20)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def touch(self) -> datetime:
        """Stamp updated_at, always moving it strictly forward."""
        now = utcnow()
        prev = self.updated_at
        if prev is not None:
            if prev.tzinfo is None:
                prev = prev.replace(tzinfo=timezone.utc)
            if now <= prev:
                now = prev + timedelta(microseconds=1)
        self.updated_at = now
        return now
