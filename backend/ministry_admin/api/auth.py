# ministry_admin/api/auth.py
"""
Caller identity.

Authentication happens upstream; the identity provider forwards the caller
as ``X-User-Id`` / ``X-User-Role`` headers. With ``AUTH_ENFORCE`` off (dev),
every request runs as a local admin principal.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status


@dataclass(frozen=True)
class Principal:
    user_id: str
    role: str


DEV_PRINCIPAL = Principal(user_id="dev@local", role="admin")


def _auth_enabled() -> bool:
    """Return True if role checks should be enforced (production), False in dev."""
    return os.getenv("AUTH_ENFORCE", "false").lower() in {"1", "true", "yes", "on"}


def get_current_user(
    user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
    role: Optional[str] = Header(default=None, alias="X-User-Role"),
) -> Principal:
    if not _auth_enabled():
        return DEV_PRINCIPAL
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id")
    return Principal(user_id=user_id, role=(role or "").strip().lower())


def require_role(required: str) -> Callable[..., Principal]:
    """Dependency factory: the caller must hold ``required`` (dev mode skips the check)."""
    def _inner(user: Principal = Depends(get_current_user)) -> Principal:
        if not _auth_enabled():
            return user
        if user.role != required:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {required}",
            )
        return user
    return _inner


require_admin = require_role("admin")
