"""Password hashing and bearer token issuance/verification."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from .errors import ExpiredCredential, MalformedCredential

TOKEN_ALGORITHM = "HS256"
USER_ID_CLAIM = "userId"
DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


# Checked against when the nickname is unknown so both login failures cost one
# bcrypt round.
DUMMY_PASSWORD_HASH = hash_password("board-timing-equalizer")


class TokenService:
    """Issue and verify signed, time-limited tokens bound to a user id.

    Tokens are self-contained; there is no revocation list, so a token stays
    valid until ``exp`` even after the client discards it.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = TOKEN_ALGORITHM,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user_id: int, *, issued_at: datetime | None = None) -> str:
        issued = issued_at or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            USER_ID_CLAIM: user_id,
            "iat": issued,
            "exp": issued + self.lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError as exc:
            raise ExpiredCredential() from exc
        except JWTError as exc:
            raise MalformedCredential() from exc

        if "exp" not in payload:
            raise MalformedCredential()
        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedCredential()
        return user_id
