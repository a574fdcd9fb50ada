"""Comment persistence."""

from __future__ import annotations

from typing import Any, cast

from sqlalchemy import select

from models import Comment, User
from .base import SQLModelRepository, _desc, _eq

CommentRow = tuple[Comment, str]


class CommentRepository(SQLModelRepository[Comment]):
    model = Comment

    async def list_for_post(self, post_id: int) -> list[CommentRow]:
        result = await self.session.execute(
            select(cast(Any, Comment), User.nickname)
            .join(User, _eq(User.id, Comment.user_id))
            .where(_eq(Comment.post_id, post_id))
            .order_by(_desc(Comment.created_at), _desc(Comment.id))
        )
        return [(comment, nickname) for comment, nickname in result.all()]
