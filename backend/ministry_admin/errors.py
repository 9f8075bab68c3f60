"""
API error taxonomy and the handlers that render every failure into the
standard envelope: ``{"success": false, "error": ..., "message": ...}``.

Services raise these (they are ``HTTPException`` subclasses, so FastAPI
routes can let them propagate untouched). Handlers are installed on the app
by ``install_error_handlers``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    field: str
    message: str


class ApiError(HTTPException):
    """HTTPException carrying a short error code alongside the message."""

    error = "Error"

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
        details: Optional[Sequence[FieldError]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message)
        if error is not None:
            self.error = error
        self.message = message
        self.details: List[FieldError] = list(details or [])


class BadRequest(ApiError):
    def __init__(self, message: str, error: str = "Bad request", details=None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, message, error, details)


class ValidationFailed(ApiError):
    def __init__(self, details: Sequence[FieldError], message: str = "Invalid request data") -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, message, "Validation failed", details)


class NotFound(ApiError):
    def __init__(self, entity: str, entity_id: Any = None) -> None:
        msg = f"{entity} not found"
        if entity_id is not None:
            msg = f"{entity} {entity_id} not found"
        super().__init__(status.HTTP_404_NOT_FOUND, msg, "Not found")
        self.entity = entity
        self.entity_id = entity_id


class Conflict(ApiError):
    def __init__(self, message: str, error: str = "Duplicate entry") -> None:
        super().__init__(status.HTTP_409_CONFLICT, message, error)


class DeleteBlocked(Conflict):
    """Deletion refused because other rows still reference the target."""

    def __init__(self, entity: str, blockers: Dict[str, int]) -> None:
        parts = [f"{n} {kind} still reference this {entity}" for kind, n in blockers.items()]
        super().__init__("Cannot delete: " + "; ".join(parts), error="Cannot delete")
        self.blockers = dict(blockers)


class InternalError(ApiError):
    def __init__(self, message: str = "Something went wrong while processing your request") -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message, "Internal server error")


# Short codes for plain HTTPExceptions raised by FastAPI/Starlette itself.
_DEFAULT_CODES = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    405: "Method not allowed",
    409: "Conflict",
    422: "Validation failed",
}


def _loc_to_field(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in {"body", "query", "path", "header"}:
        parts = parts[1:]
    return ".".join(parts)


def field_errors(errors: Sequence[Dict[str, Any]]) -> List[FieldError]:
    """Convert pydantic ``errors()`` output into ordered (field, message) pairs."""
    out: List[FieldError] = []
    for err in errors:
        msg = str(err.get("msg", "Invalid value"))
        # "Value error, ..." prefix comes from custom validators
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append(FieldError(field=_loc_to_field(err.get("loc", ())), message=msg))
    return out


def envelope(error: str, message: str, details: Optional[Sequence[FieldError]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": error, "message": message}
    if details:
        body["details"] = [d.model_dump() for d in details]
    return body


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(exc.error, exc.message, exc.details),
        headers=getattr(exc, "headers", None),
    )


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, ApiError):
        return await _api_error_handler(request, exc)
    code = _DEFAULT_CODES.get(exc.status_code, "Error")
    message = exc.detail if isinstance(exc.detail, str) else code
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(code, message),
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = field_errors(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope("Validation failed", "Invalid request data", details),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    err = InternalError()
    return JSONResponse(status_code=err.status_code, content=envelope(err.error, err.message))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
