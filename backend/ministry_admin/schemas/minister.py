# ministry_admin/schemas/minister.py
"""
Minister payloads.

A create payload carries the scalar record plus up to ten nested collections
(children, emergency contacts, ...). Updates replace scalars only; collection
rows are managed through their own endpoints and use the ``*Create`` item
schemas below.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, List, Optional

from pydantic import EmailStr, Field, StringConstraints, field_validator

from ministry_admin.models.mixins import CivilStatus, Gender
from ministry_admin.schemas.common import (
    Address,
    CamelModel,
    Name,
    OptAddress,
    OptName,
    OptShort,
    OptText1000,
    OptUrl,
    OptYear,
    Short,
    Text1000,
    Year,
)

Title = Annotated[str, StringConstraints(min_length=1, max_length=200)]
OptTitle = Optional[Annotated[str, StringConstraints(max_length=200)]]
Measure = Annotated[str, StringConstraints(min_length=1, max_length=20)]


def _blank_is_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# ---------- Collection items ----------

class ChildCreate(CamelModel):
    name: Name
    place_of_birth: Address
    date_of_birth: date
    gender: Gender


class EmergencyContactCreate(CamelModel):
    name: Name
    relationship: Name
    address: Address
    contact_number: Short


class EducationBackgroundCreate(CamelModel):
    school_name: Title
    educational_attainment: Name
    date_graduated: Optional[date] = None
    description: OptText1000 = None
    course: OptTitle = None


class MinistryExperienceCreate(CamelModel):
    ministry_rank_id: int = Field(..., gt=0)
    description: OptText1000 = None
    from_year: Year
    to_year: OptYear = None

    @field_validator("to_year", "description", mode="before")
    @classmethod
    def _blank_optional(cls, v):
        return _blank_is_none(v)


class MinistrySkillLinkCreate(CamelModel):
    ministry_skill_id: int = Field(..., gt=0)


class MinistryRecordCreate(CamelModel):
    church_location_id: int = Field(..., gt=0)
    from_year: Year
    to_year: OptYear = None
    contribution: OptText1000 = None

    @field_validator("to_year", "contribution", mode="before")
    @classmethod
    def _blank_optional(cls, v):
        return _blank_is_none(v)


class AwardRecognitionCreate(CamelModel):
    year: Year
    description: Text1000


class EmploymentRecordCreate(CamelModel):
    company_name: Title
    position: Name
    from_year: Year
    to_year: OptYear = None

    @field_validator("to_year", mode="before")
    @classmethod
    def _blank_optional(cls, v):
        return _blank_is_none(v)


class SeminarConferenceCreate(CamelModel):
    title: Title
    description: OptText1000 = None
    place: OptAddress = None
    year: Year
    number_of_hours: int = Field(..., ge=0)


class CaseReportCreate(CamelModel):
    year: Year
    description: Text1000


class _OwnedRead(CamelModel):
    id: int
    minister_id: int
    created_at: datetime
    updated_at: datetime


class ChildRead(_OwnedRead, ChildCreate):
    pass


class EmergencyContactRead(_OwnedRead, EmergencyContactCreate):
    pass


class EducationBackgroundRead(_OwnedRead, EducationBackgroundCreate):
    pass


class MinistryExperienceRead(_OwnedRead, MinistryExperienceCreate):
    pass


class MinistrySkillLinkRead(_OwnedRead, MinistrySkillLinkCreate):
    pass


class MinistryRecordRead(_OwnedRead, MinistryRecordCreate):
    pass


class AwardRecognitionRead(_OwnedRead, AwardRecognitionCreate):
    pass


class EmploymentRecordRead(_OwnedRead, EmploymentRecordCreate):
    pass


class SeminarConferenceRead(_OwnedRead, SeminarConferenceCreate):
    pass


class CaseReportRead(_OwnedRead, CaseReportCreate):
    pass


# ---------- Minister ----------

_OPTIONAL_TEXT = (
    "middle_name",
    "suffix",
    "nickname",
    "image_url",
    "email",
    "telephone",
    "permanent_address",
    "passport_number",
    "sss_number",
    "philhealth",
    "tin",
    "spouse_name",
    "spouse_province",
    "spouse_occupation",
    "skills",
    "hobbies",
    "sports",
    "other_religious_secular_training",
    "certified_by",
    "signature_image_url",
    "signature_by_certified_image_url",
)


class MinisterBase(CamelModel):
    church_id: int = Field(..., gt=0)

    # Personal information
    first_name: Name
    last_name: Name
    middle_name: OptName = None
    suffix: Optional[Annotated[str, StringConstraints(max_length=20)]] = None
    nickname: OptName = None
    date_of_birth: date
    place_of_birth: Address
    gender: Gender
    height_feet: Measure
    weight_kg: Measure
    civil_status: CivilStatus
    image_url: OptUrl = None

    # Contact & government IDs
    email: Optional[EmailStr] = None
    telephone: OptShort = None
    address: Address
    present_address: Address
    permanent_address: OptAddress = None
    passport_number: OptShort = None
    sss_number: OptShort = None
    philhealth: OptShort = None
    tin: OptShort = None

    # Family
    father_name: Name
    father_province: Name
    father_birthday: date
    father_occupation: Name
    mother_name: Name
    mother_province: Name
    mother_birthday: date
    mother_occupation: Name
    spouse_name: OptName = None
    spouse_province: OptName = None
    spouse_birthday: Optional[date] = None
    spouse_occupation: OptName = None
    wedding_date: Optional[date] = None

    # Skills & interests
    skills: OptText1000 = None
    hobbies: OptText1000 = None
    sports: OptText1000 = None
    other_religious_secular_training: OptText1000 = None

    # Certification
    certified_by: OptName = None
    signature_image_url: OptUrl = None
    signature_by_certified_image_url: OptUrl = None

    is_active: bool = True

    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def _blank_optional(cls, v):
        return _blank_is_none(v)

    @field_validator("date_of_birth")
    @classmethod
    def _born_in_past(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class MinisterCreate(MinisterBase):
    children: List[ChildCreate] = Field(default_factory=list)
    emergency_contacts: List[EmergencyContactCreate] = Field(default_factory=list)
    education_backgrounds: List[EducationBackgroundCreate] = Field(default_factory=list)
    ministry_experiences: List[MinistryExperienceCreate] = Field(default_factory=list)
    ministry_skills: List[MinistrySkillLinkCreate] = Field(default_factory=list)
    ministry_records: List[MinistryRecordCreate] = Field(default_factory=list)
    awards_recognitions: List[AwardRecognitionCreate] = Field(default_factory=list)
    employment_records: List[EmploymentRecordCreate] = Field(default_factory=list)
    seminars_conferences: List[SeminarConferenceCreate] = Field(default_factory=list)
    case_reports: List[CaseReportCreate] = Field(default_factory=list)

    @field_validator(
        "children",
        "emergency_contacts",
        "education_backgrounds",
        "ministry_experiences",
        "ministry_skills",
        "ministry_records",
        "awards_recognitions",
        "employment_records",
        "seminars_conferences",
        "case_reports",
        mode="before",
    )
    @classmethod
    def _null_is_empty(cls, v):
        return [] if v is None else v


class MinisterUpdate(MinisterBase):
    """Full scalar replacement; nested collection keys are ignored."""


class MinisterRead(MinisterBase):
    id: int
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MinisterSummary(CamelModel):
    """Row shape for list views."""

    id: int
    church_id: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    gender: Gender
    civil_status: CivilStatus
    email: Optional[str] = None
    telephone: Optional[str] = None
    present_address: str
    image_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class MinisterDetails(MinisterRead):
    children: List[ChildRead] = Field(default_factory=list)
    emergency_contacts: List[EmergencyContactRead] = Field(default_factory=list)
    education_backgrounds: List[EducationBackgroundRead] = Field(default_factory=list)
    ministry_experiences: List[MinistryExperienceRead] = Field(default_factory=list)
    ministry_skills: List[MinistrySkillLinkRead] = Field(default_factory=list)
    ministry_records: List[MinistryRecordRead] = Field(default_factory=list)
    awards_recognitions: List[AwardRecognitionRead] = Field(default_factory=list)
    employment_records: List[EmploymentRecordRead] = Field(default_factory=list)
    seminars_conferences: List[SeminarConferenceRead] = Field(default_factory=list)
    case_reports: List[CaseReportRead] = Field(default_factory=list)


class MinisterSearchHit(CamelModel):
    id: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    nickname: Optional[str] = None
    email: Optional[str] = None
    church_id: int
    church_name: Optional[str] = None
    is_active: bool
