# ministry_admin/models/minister.py
"""
Minister record and its dependent collections.

Each dependent table carries ``minister_id`` explicitly; there are no ORM
relationships or cascades here. The minister service writes and deletes the
collections itself, inside the same transaction as the parent row.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import Base
from ministry_admin.models.mixins import CivilStatus, Gender, TimestampMixin, enum_column


class Minister(TimestampMixin, Base):
    __tablename__ = "ministers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    church_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Personal information
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    suffix: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    nickname: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    place_of_birth: Mapped[str] = mapped_column(String(500), nullable=False)
    gender: Mapped[Gender] = mapped_column(enum_column(Gender, "gender"), nullable=False)
    height_feet: Mapped[str] = mapped_column(String(20), nullable=False)
    weight_kg: Mapped[str] = mapped_column(String(20), nullable=False)
    civil_status: Mapped[CivilStatus] = mapped_column(
        enum_column(CivilStatus, "civil_status"), nullable=False
    )
    image_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    # Contact & government IDs
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    telephone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    present_address: Mapped[str] = mapped_column(String(500), nullable=False)
    permanent_address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    passport_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    sss_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    philhealth: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    tin: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Family
    father_name: Mapped[str] = mapped_column(String(100), nullable=False)
    father_province: Mapped[str] = mapped_column(String(100), nullable=False)
    father_birthday: Mapped[date] = mapped_column(Date, nullable=False)
    father_occupation: Mapped[str] = mapped_column(String(100), nullable=False)
    mother_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mother_province: Mapped[str] = mapped_column(String(100), nullable=False)
    mother_birthday: Mapped[date] = mapped_column(Date, nullable=False)
    mother_occupation: Mapped[str] = mapped_column(String(100), nullable=False)
    spouse_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    spouse_province: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    spouse_birthday: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    spouse_occupation: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    wedding_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Skills & interests
    skills: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    hobbies: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    sports: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    other_religious_secular_training: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    # Certification
    certified_by: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    signature_image_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    signature_by_certified_image_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    def __repr__(self) -> str:
        return f"<Minister id={self.id} name={self.first_name!r} {self.last_name!r}>"


class _MinisterOwned(TimestampMixin):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    minister_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ministers.id"), nullable=False, index=True
    )


class MinisterChild(_MinisterOwned, Base):
    __tablename__ = "minister_children"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    place_of_birth: Mapped[str] = mapped_column(String(500), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender] = mapped_column(enum_column(Gender, "gender"), nullable=False)


class MinisterEmergencyContact(_MinisterOwned, Base):
    __tablename__ = "minister_emergency_contacts"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    contact_number: Mapped[str] = mapped_column(String(50), nullable=False)


class MinisterEducationBackground(_MinisterOwned, Base):
    __tablename__ = "minister_education_backgrounds"

    school_name: Mapped[str] = mapped_column(String(200), nullable=False)
    educational_attainment: Mapped[str] = mapped_column(String(100), nullable=False)
    date_graduated: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    course: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)


class MinisterMinistryExperience(_MinisterOwned, Base):
    __tablename__ = "minister_ministry_experiences"

    ministry_rank_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ministry_ranks.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    from_year: Mapped[str] = mapped_column(String(4), nullable=False)
    to_year: Mapped[Optional[str]] = mapped_column(String(4), nullable=True)


class MinisterMinistrySkill(_MinisterOwned, Base):
    """Junction row: minister <-> ministry skill."""

    __tablename__ = "minister_ministry_skills"

    ministry_skill_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ministry_skills.id", ondelete="RESTRICT"), nullable=False, index=True
    )


class MinisterMinistryRecord(_MinisterOwned, Base):
    __tablename__ = "minister_ministry_records"

    church_location_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    from_year: Mapped[str] = mapped_column(String(4), nullable=False)
    to_year: Mapped[Optional[str]] = mapped_column(String(4), nullable=True)
    contribution: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)


class MinisterAwardRecognition(_MinisterOwned, Base):
    __tablename__ = "minister_awards_recognitions"

    year: Mapped[str] = mapped_column(String(4), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)


class MinisterEmploymentRecord(_MinisterOwned, Base):
    __tablename__ = "minister_employment_records"

    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    from_year: Mapped[str] = mapped_column(String(4), nullable=False)
    to_year: Mapped[Optional[str]] = mapped_column(String(4), nullable=True)


class MinisterSeminarConference(_MinisterOwned, Base):
    __tablename__ = "minister_seminars_conferences"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    place: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    year: Mapped[str] = mapped_column(String(4), nullable=False)
    number_of_hours: Mapped[int] = mapped_column(Integer, nullable=False)


class MinisterCaseReport(_MinisterOwned, Base):
    __tablename__ = "minister_case_reports"

    year: Mapped[str] = mapped_column(String(4), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
