from __future__ import annotations

import datetime as dt
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from ministry_admin.schemas.common import Address, CamelModel, OptUrl, Text1000

EventName = Annotated[str, StringConstraints(min_length=1, max_length=200)]


class ChurchEventBase(CamelModel):
    name: EventName
    description: Text1000
    place: Address
    datetime: dt.datetime
    image_url: OptUrl = None
    church_id: Optional[int] = Field(None, gt=0)

    @field_validator("datetime")
    @classmethod
    def _require_tzaware(cls, v: dt.datetime) -> dt.datetime:
        """Event times must carry an offset (e.g. '2025-08-09T09:00:00+08:00')."""
        if v.tzinfo is None or v.tzinfo.utcoffset(v) is None:
            raise ValueError("Datetime must include a timezone offset")
        # stored as UTC; SQLite keeps no offset
        return v.astimezone(dt.timezone.utc)


class ChurchEventCreate(ChurchEventBase):
    pass


class ChurchEventUpdate(ChurchEventBase):
    pass


class ChurchEventRead(ChurchEventBase):
    id: int
    created_at: dt.datetime
    updated_at: dt.datetime

    @field_validator("datetime", mode="before")
    @classmethod
    def _assume_utc(cls, v):
        # SQLite hands back naive datetimes
        if isinstance(v, dt.datetime) and v.tzinfo is None:
            return v.replace(tzinfo=dt.timezone.utc)
        return v
