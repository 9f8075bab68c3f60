from __future__ import annotations

import datetime as dt
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ministry_admin.db import Base
from ministry_admin.models.mixins import TimestampMixin


class ChurchEvent(TimestampMixin, Base):
    __tablename__ = "church_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    place: Mapped[str] = mapped_column(String(500), nullable=False)
    datetime: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)

    # Optional host church; events may be held off-site
    church_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("churches.id", ondelete="RESTRICT"), nullable=True, index=True
    )

    def __repr__(self) -> str:
        return f"<ChurchEvent id={self.id} name={self.name!r} at={self.datetime}>"
