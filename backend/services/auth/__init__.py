"""Authentication domain services."""

from .authentication import (
    BEARER_SCHEME,
    authenticate,
    format_bearer_credential,
    parse_bearer_credential,
)
from .cookies import clear_auth_cookie, cookie_secure, set_auth_cookie

__all__ = [
    "BEARER_SCHEME",
    "authenticate",
    "clear_auth_cookie",
    "cookie_secure",
    "format_bearer_credential",
    "parse_bearer_credential",
    "set_auth_cookie",
]
