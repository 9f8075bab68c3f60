"""
Shared FastAPI dependency helpers.

`list_params` parses the paging/search/sort query string every list route
accepts. Out-of-range values are rejected (400), not clamped.
"""
from typing import Literal, Optional

from fastapi import Query

from ministry_admin.services.common import MAX_LIMIT, ListParams


def list_params(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_LIMIT),
    search: Optional[str] = Query(None, max_length=200),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
) -> ListParams:
    return ListParams(
        page=page,
        limit=limit,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        is_active=is_active,
    )
