"""Like persistence."""

from __future__ import annotations

from typing import Any, cast

from sqlalchemy import func, select

from models import Like
from .base import SQLModelRepository, _eq


class LikeRepository(SQLModelRepository[Like]):
    model = Like
    conflict_detail = "Post is already liked"

    async def find_for(self, post_id: int, user_id: int) -> Like | None:
        result = await self.session.execute(
            select(cast(Any, Like))
            .where(_eq(Like.post_id, post_id), _eq(Like.user_id, user_id))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def count_for_post(self, post_id: int) -> int:
        result = await self.session.execute(
            select(func.count(cast(Any, Like.id))).where(_eq(Like.post_id, post_id))
        )
        return int(result.scalar_one() or 0)
