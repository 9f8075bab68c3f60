"""Pure record validation: untrusted mapping in, typed payload or field errors out."""
from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ministry_admin.errors import ValidationFailed, field_errors

M = TypeVar("M", bound=BaseModel)


def validate_record(schema: Type[M], raw: Any) -> M:
    """Validate ``raw`` against ``schema``.

    Returns the fully-typed model, or raises ``ValidationFailed`` whose
    ``details`` list every failing field in the order pydantic reports them.
    No partially-built object ever escapes.
    """
    if not isinstance(raw, Mapping):
        raise ValidationFailed(
            field_errors([{"loc": (), "msg": "Request body must be a JSON object"}])
        )
    try:
        return schema.model_validate(dict(raw))
    except ValidationError as exc:
        raise ValidationFailed(field_errors(exc.errors())) from None
