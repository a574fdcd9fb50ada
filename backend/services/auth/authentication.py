"""Request authentication: cookie credential to principal.

Each request moves from unchecked to either authenticated (a ``User`` is
returned) or rejected (``AuthenticationError`` carrying one ``AuthFailure``).
There is no partially authenticated outcome.
"""

from __future__ import annotations

from core.errors import AuthFailure, AuthenticationError
from core.security import TokenService
from models import User
from services.contracts import UserStore

BEARER_SCHEME = "Bearer"


def format_bearer_credential(token: str) -> str:
    return f"{BEARER_SCHEME} {token}"


def parse_bearer_credential(raw_credential: str | None) -> str:
    """Return the token part of ``"Bearer <token>"``."""
    if not raw_credential:
        raise AuthenticationError(AuthFailure.NO_CREDENTIAL)
    scheme, separator, token = raw_credential.partition(" ")
    if scheme != BEARER_SCHEME or not separator or not token or " " in token:
        raise AuthenticationError(AuthFailure.BAD_SCHEME)
    return token


async def authenticate(
    raw_credential: str | None,
    *,
    tokens: TokenService,
    users: UserStore,
) -> User:
    token = parse_bearer_credential(raw_credential)
    user_id = tokens.verify(token)
    user = await users.find_by_id(user_id)
    if user is None:
        raise AuthenticationError(AuthFailure.UNKNOWN_PRINCIPAL)
    return user
