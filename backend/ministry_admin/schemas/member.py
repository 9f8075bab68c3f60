from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints, field_validator

from ministry_admin.models.mixins import CivilStatus, Gender
from ministry_admin.schemas.common import (
    CamelModel,
    Name,
    OptAddress,
    OptName,
    OptShort,
    OptText1000,
    OptUrl,
)

SocialLink = Optional[Annotated[str, StringConstraints(max_length=255)]]

_OPTIONAL_TEXT = (
    "profile_picture",
    "middle_name",
    "ministry_involvement",
    "occupation",
    "organization",
    "educational_attainment",
    "school",
    "degree",
    "mobile_number",
    "email",
    "home_address",
    "facebook_link",
    "x_link",
    "instagram_link",
    "tiktok_link",
    "notes",
)


class MemberBase(CamelModel):
    church_id: int = Field(..., gt=0)
    profile_picture: OptUrl = None
    first_name: Name
    last_name: Name
    middle_name: OptName = None
    gender: Gender
    birthdate: date
    year_joined: int
    marital_status: CivilStatus = CivilStatus.single

    ministry_involvement: OptText1000 = None
    occupation: OptName = None
    organization: OptName = None

    is_lifegroup_leader: bool = False
    lifegroup_leader_id: Optional[int] = Field(None, gt=0)

    educational_attainment: OptName = None
    school: OptName = None
    degree: OptName = None

    mobile_number: OptShort = None
    email: Optional[EmailStr] = None
    home_address: OptAddress = None

    facebook_link: SocialLink = None
    x_link: SocialLink = None
    instagram_link: SocialLink = None
    tiktok_link: SocialLink = None

    notes: OptText1000 = None
    is_active: bool = True

    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("year_joined")
    @classmethod
    def _year_joined_range(cls, v: int) -> int:
        this_year = date.today().year
        if not 1900 <= v <= this_year:
            raise ValueError(f"Year joined must be between 1900 and {this_year}")
        return v

    @field_validator("birthdate")
    @classmethod
    def _birthdate_not_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Birthdate cannot be in the future")
        return v


class MemberCreate(MemberBase):
    """Payload for creating a member."""


class MemberUpdate(MemberBase):
    """Full replacement of every scalar column."""


class MemberRead(MemberBase):
    id: int
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MemberSearchHit(CamelModel):
    id: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    profile_picture: Optional[str] = None
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    gender: Gender
    year_joined: int
    church_id: int
    church_name: Optional[str] = None
    is_active: bool


class RecentMember(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    church_id: int
    church_name: Optional[str] = None
    created_at: datetime
