from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import EmailStr, StringConstraints, ValidationInfo, field_validator

from ministry_admin.schemas.common import CamelModel, OptText1000


class ContactBase(CamelModel):
    name: Annotated[str, StringConstraints(min_length=2, max_length=100)]
    email: EmailStr
    subject: Annotated[str, StringConstraints(min_length=3, max_length=200)]
    description: Annotated[str, StringConstraints(min_length=10, max_length=1000)]
    prayer_request: OptText1000 = None
    support_email: EmailStr


class ContactCreate(ContactBase):
    """Public contact form; the address must be typed twice."""

    repeat_email: EmailStr

    @field_validator("repeat_email")
    @classmethod
    def _emails_match(cls, v: str, info: ValidationInfo) -> str:
        email = info.data.get("email")
        if email is not None and v.lower() != str(email).lower():
            raise ValueError("Emails do not match")
        return v


class ContactUpdate(ContactBase):
    pass


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    description: str
    prayer_request: Optional[str] = None
    support_email: str
    created_at: datetime
    updated_at: datetime
