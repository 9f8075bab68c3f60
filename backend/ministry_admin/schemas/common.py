# ministry_admin/schemas/common.py
"""
Shared pydantic building blocks: the camelCase base model, reusable
constrained string types, and the response envelopes every route returns.
"""
from __future__ import annotations

from typing import Annotated, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire; accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


# ---- Constrained strings --------------------------------------------------------

Name = Annotated[str, StringConstraints(min_length=1, max_length=100)]
OptName = Optional[Annotated[str, StringConstraints(max_length=100)]]
Short = Annotated[str, StringConstraints(min_length=1, max_length=50)]
OptShort = Optional[Annotated[str, StringConstraints(max_length=50)]]
Address = Annotated[str, StringConstraints(min_length=1, max_length=500)]
OptAddress = Optional[Annotated[str, StringConstraints(max_length=500)]]
Text1000 = Annotated[str, StringConstraints(min_length=1, max_length=1000)]
OptText1000 = Optional[Annotated[str, StringConstraints(max_length=1000)]]
OptUrl = Optional[Annotated[str, StringConstraints(max_length=2048)]]
Year = Annotated[str, StringConstraints(pattern=r"^\d{4}$")]
OptYear = Optional[Year]

SortOrder = Literal["asc", "desc"]


# ---- Envelopes ------------------------------------------------------------------

class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = (total + limit - 1) // limit if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class SortInfo(CamelModel):
    by: str
    order: SortOrder


class DataResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T


class MessageResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None


class PageResponse(CamelModel, Generic[T]):
    success: bool = True
    data: List[T]
    pagination: Pagination
    search: Optional[str] = None
    sort: SortInfo


class ListResponse(CamelModel, Generic[T]):
    """Unpaginated list (quick search, recent rows)."""

    success: bool = True
    data: List[T]
    count: int = Field(0, description="Number of rows in data")


class DeletedRef(CamelModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
