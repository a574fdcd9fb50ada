"""Typed failures raised by services and translated at the HTTP boundary."""

from __future__ import annotations

from enum import Enum

from fastapi import status


class AuthFailure(str, Enum):
    """Closed set of reasons a request can be rejected as unauthenticated."""

    NO_CREDENTIAL = "no_credential"
    BAD_SCHEME = "bad_scheme"
    EXPIRED = "expired"
    MALFORMED = "malformed"
    UNKNOWN_PRINCIPAL = "unknown_principal"


AUTH_FAILURE_MESSAGES: dict[AuthFailure, str] = {
    AuthFailure.NO_CREDENTIAL: "Authentication credential is missing",
    AuthFailure.BAD_SCHEME: "Authentication credential must use the Bearer scheme",
    AuthFailure.EXPIRED: "Authentication token has expired",
    AuthFailure.MALFORMED: "Authentication token is invalid",
    AuthFailure.UNKNOWN_PRINCIPAL: "Authenticated user no longer exists",
}


class BoardError(Exception):
    """Base class for every failure that maps to an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request payload is malformed"


class PreconditionFailedError(ValidationError):
    """Well-formed input that breaks a semantic rule."""

    status_code = status.HTTP_412_PRECONDITION_FAILED
    default_detail = "Request payload does not satisfy the required format"


class AuthenticationError(BoardError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, reason: AuthFailure) -> None:
        self.reason = reason
        super().__init__(AUTH_FAILURE_MESSAGES[reason])


class ExpiredCredential(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(AuthFailure.EXPIRED)


class MalformedCredential(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(AuthFailure.MALFORMED)


class AuthorizationError(BoardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to modify this resource"


class NotFoundError(BoardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(BoardError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"


class InternalError(BoardError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"


__all__ = [
    "AUTH_FAILURE_MESSAGES",
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
]
