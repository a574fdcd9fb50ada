"""Signup and login rules."""

from __future__ import annotations

import asyncio
import logging
import re

from core.errors import ConflictError, PreconditionFailedError, ValidationError
from core.security import DUMMY_PASSWORD_HASH, TokenService, hash_password, verify_password
from models import User
from services.contracts import UserStore

logger = logging.getLogger(__name__)

NICKNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]{3,}$")
MAX_NICKNAME_LENGTH = 30
MIN_PASSWORD_LENGTH = 4
# bcrypt ignores everything past 72 bytes.
MAX_PASSWORD_BYTES = 72


def _require_field(value: object) -> str:
    if not isinstance(value, str) or value == "":
        raise ValidationError()
    return value


class AccountService:
    def __init__(self, users: UserStore, tokens: TokenService) -> None:
        self.users = users
        self.tokens = tokens

    async def signup(self, nickname: object, password: object, confirm: object) -> User:
        nickname = _require_field(nickname)
        password = _require_field(password)
        confirm = _require_field(confirm)

        if not NICKNAME_PATTERN.fullmatch(nickname) or len(nickname) > MAX_NICKNAME_LENGTH:
            raise PreconditionFailedError("Nickname format is invalid")
        if (
            len(password) < MIN_PASSWORD_LENGTH
            or len(password.encode("utf-8")) > MAX_PASSWORD_BYTES
            or nickname in password
        ):
            raise PreconditionFailedError("Password format is invalid")
        if password != confirm:
            raise PreconditionFailedError("Password confirmation does not match")

        if await self.users.find_by_nickname(nickname) is not None:
            raise ConflictError("Nickname is already taken")

        password_hash = await asyncio.to_thread(hash_password, password)
        # A concurrent signup can still win the race; the unique index turns
        # that into ConflictError inside the repository.
        user = await self.users.create(nickname=nickname, password_hash=password_hash)
        logger.info("Registered user %s", user.id)
        return user

    async def login(self, nickname: object, password: object) -> tuple[User, str]:
        nickname = _require_field(nickname)
        password = _require_field(password)

        user = await self.users.find_by_nickname(nickname)
        if user is None or user.id is None:
            await asyncio.to_thread(verify_password, password, DUMMY_PASSWORD_HASH)
            raise PreconditionFailedError("Check your nickname")
        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            raise PreconditionFailedError("Check your password")

        return user, self.tokens.issue(user.id)
