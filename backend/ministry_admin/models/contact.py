from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import Base
from ministry_admin.models.mixins import TimestampMixin


class ContactSubmission(TimestampMixin, Base):
    """A message sent through the public contact form."""

    __tablename__ = "contact_submissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    prayer_request: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    support_email: Mapped[str] = mapped_column(String(255), nullable=False)
