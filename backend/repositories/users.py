"""User persistence (the credential store)."""

from __future__ import annotations

from sqlalchemy import select

from models import User
from .base import SQLModelRepository, _eq


class UserRepository(SQLModelRepository[User]):
    model = User
    conflict_detail = "Nickname is already taken"

    async def find_by_nickname(self, nickname: str) -> User | None:
        result = await self.session.execute(
            select(User).where(_eq(User.nickname, nickname)).limit(1)
        )
        return result.scalar_one_or_none()
