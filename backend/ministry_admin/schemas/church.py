from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints, field_validator

from ministry_admin.schemas.common import CamelModel, Name, OptText1000, OptUrl

Coordinate = Optional[Annotated[str, StringConstraints(max_length=32)]]


class ChurchBase(CamelModel):
    name: Name
    image_url: OptUrl = None
    longitude: Coordinate = None
    latitude: Coordinate = None
    address: Optional[Annotated[str, StringConstraints(min_length=10, max_length=500)]] = None
    email: Optional[EmailStr] = None
    description: OptText1000 = None
    link: Optional[Annotated[str, StringConstraints(max_length=255)]] = None

    @field_validator("email", "image_url", "link", "address", "description", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("latitude")
    @classmethod
    def _latitude_range(cls, v: Optional[str]) -> Optional[str]:
        return _check_coordinate(v, 90.0, "Latitude")

    @field_validator("longitude")
    @classmethod
    def _longitude_range(cls, v: Optional[str]) -> Optional[str]:
        return _check_coordinate(v, 180.0, "Longitude")


def _check_coordinate(v: Optional[str], bound: float, label: str) -> Optional[str]:
    if v is None or v == "":
        return None
    try:
        f = float(v)
    except ValueError:
        raise ValueError(f"{label} must be a number") from None
    if not -bound <= f <= bound:
        raise ValueError(f"{label} must be between {-bound:g} and {bound:g}")
    return v


class ChurchCreate(ChurchBase):
    """Payload for creating a church."""


class ChurchUpdate(ChurchBase):
    """Full replacement of every scalar column."""


class ChurchRead(ChurchBase):
    id: int
    # stored values are echoed back even if they predate current rules
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ChurchStats(CamelModel):
    church_id: int
    church_name: str
    member_count: int
    minister_count: int
    total: int = Field(..., description="Members plus ministers")
