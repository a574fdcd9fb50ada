"""Owner-only mutation rule shared by posts and comments."""

from __future__ import annotations

from typing import Protocol

from core.errors import AuthorizationError
from models import User


class OwnedResource(Protocol):
    user_id: int


def allow(principal: User, owner_id: int) -> bool:
    return principal.id is not None and principal.id == owner_id


def require_owner(
    principal: User,
    resource: OwnedResource,
    *,
    detail: str | None = None,
) -> None:
    """Raise AuthorizationError unless ``principal`` created ``resource``."""
    if not allow(principal, resource.user_id):
        raise AuthorizationError(detail)
