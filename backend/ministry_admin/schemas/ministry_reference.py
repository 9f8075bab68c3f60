"""Ministry rank and ministry skill lookup payloads."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints, field_validator

from ministry_admin.schemas.common import CamelModel, Name

RefDescription = Optional[Annotated[str, StringConstraints(max_length=500)]]


class ReferenceBase(CamelModel):
    name: Name
    description: RefDescription = None

    @field_validator("description", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ReferenceRead(ReferenceBase):
    id: int
    created_at: datetime
    updated_at: datetime


class MinistryRankCreate(ReferenceBase):
    pass


class MinistryRankUpdate(ReferenceBase):
    pass


class MinistryRankRead(ReferenceRead):
    pass


class MinistrySkillCreate(ReferenceBase):
    pass


class MinistrySkillUpdate(ReferenceBase):
    pass


class MinistrySkillRead(ReferenceRead):
    pass
