"""Post persistence."""

from __future__ import annotations

from typing import Any, cast

from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import aliased

from models import Comment, Like, Post, User
from .base import SQLModelRepository, _desc, _eq

PostRow = tuple[Post, str]
LikedPostRow = tuple[Post, str, int]


class PostRepository(SQLModelRepository[Post]):
    model = Post

    async def find_with_author(self, post_id: int) -> PostRow | None:
        result = await self.session.execute(
            select(cast(Any, Post), User.nickname)
            .join(User, _eq(User.id, Post.user_id))
            .where(_eq(Post.id, post_id))
            .limit(1)
        )
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def list_with_authors(self) -> list[PostRow]:
        result = await self.session.execute(
            select(cast(Any, Post), User.nickname)
            .join(User, _eq(User.id, Post.user_id))
            .order_by(_desc(Post.created_at), _desc(Post.id))
        )
        return [(post, nickname) for post, nickname in result.all()]

    async def list_liked_by(self, user_id: int) -> list[LikedPostRow]:
        """Posts liked by ``user_id``, most-liked first, then newest."""
        like_counts = (
            select(
                cast(Any, Like.post_id).label("post_id"),
                func.count(cast(Any, Like.id)).label("like_count"),
            )
            .group_by(cast(Any, Like.post_id))
            .subquery()
        )
        viewer_like = aliased(Like)
        result = await self.session.execute(
            select(cast(Any, Post), User.nickname, like_counts.c.like_count)
            .join(User, _eq(User.id, Post.user_id))
            .join(like_counts, _eq(like_counts.c.post_id, Post.id))
            .join(
                viewer_like,
                and_(
                    _eq(viewer_like.post_id, Post.id),
                    _eq(viewer_like.user_id, user_id),
                ),
            )
            .order_by(
                like_counts.c.like_count.desc(),
                _desc(Post.created_at),
                _desc(Post.id),
            )
        )
        return [(post, nickname, int(count)) for post, nickname, count in result.all()]

    async def delete(self, record_id: int) -> bool:
        # Dependents go in the same transaction as the post itself.
        await self.session.execute(delete(Like).where(_eq(Like.post_id, record_id)))
        await self.session.execute(delete(Comment).where(_eq(Comment.post_id, record_id)))
        return await super().delete(record_id)
