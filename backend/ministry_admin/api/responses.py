"""Envelope builders shared by the routers."""
from __future__ import annotations

import io
from typing import Any, Iterable, Type

from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from ministry_admin.schemas.common import PageResponse, Pagination, SortInfo
from ministry_admin.services.common import ListParams
from ministry_admin.services.exports import XLSX_MEDIA_TYPE, export_filename


def page_response(rows: Iterable[Any], total: int, params: ListParams, schema: Type[BaseModel]) -> PageResponse:
    return PageResponse(
        data=[schema.model_validate(r) for r in rows],
        pagination=Pagination.build(params.page, params.limit, total),
        search=params.term,
        sort=SortInfo(by=params.sort_by, order=params.sort_order),
    )


def xlsx_response(content: bytes, entity: str) -> StreamingResponse:
    filename = export_filename(entity)
    return StreamingResponse(
        io.BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
