from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import Base
from ministry_admin.models.mixins import TimestampMixin


class Church(TimestampMixin, Base):
    """A church location. Members and ministers belong to exactly one church."""

    __tablename__ = "churches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    # Map picker hands these over as strings
    longitude: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    latitude: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    link: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Church id={self.id} name={self.name!r}>"
