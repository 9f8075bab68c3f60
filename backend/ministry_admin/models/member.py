from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import Base
from ministry_admin.models.mixins import CivilStatus, Gender, TimestampMixin, enum_column


class Member(TimestampMixin, Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    church_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Profile
    profile_picture: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    gender: Mapped[Gender] = mapped_column(enum_column(Gender, "gender"), nullable=False)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    year_joined: Mapped[int] = mapped_column(Integer, nullable=False)
    marital_status: Mapped[CivilStatus] = mapped_column(
        enum_column(CivilStatus, "civil_status"), nullable=False, default=CivilStatus.single
    )

    # Ministry & work
    ministry_involvement: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    occupation: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    organization: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Life group
    is_lifegroup_leader: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    lifegroup_leader_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("members.id", ondelete="RESTRICT"), nullable=True
    )

    # Education
    educational_attainment: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    school: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    degree: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Contact
    mobile_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    home_address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Social links (URL or handle)
    facebook_link: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    x_link: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    instagram_link: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tiktok_link: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    def __repr__(self) -> str:
        return f"<Member id={self.id} name={self.first_name!r} {self.last_name!r}>"
