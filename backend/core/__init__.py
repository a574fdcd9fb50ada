"""Core configuration, security and error primitives."""

from .config import Settings, get_settings, settings
from .errors import (
    AuthFailure,
    AuthenticationError,
    AuthorizationError,
    BoardError,
    ConflictError,
    ExpiredCredential,
    InternalError,
    MalformedCredential,
    NotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from .security import (
    DUMMY_PASSWORD_HASH,
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "AuthFailure",
    "AuthenticationError",
    "AuthorizationError",
    "BoardError",
    "ConflictError",
    "ExpiredCredential",
    "InternalError",
    "MalformedCredential",
    "NotFoundError",
    "PreconditionFailedError",
    "ValidationError",
    "DUMMY_PASSWORD_HASH",
    "TokenService",
    "hash_password",
    "verify_password",
]
