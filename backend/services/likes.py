"""Like toggling and liked-post listing."""

from __future__ import annotations

import logging
from enum import Enum

from core.errors import ConflictError, NotFoundError
from models import Post
from services.contracts import LikeStore, PostStore
from services.posts import POST_NOT_FOUND

logger = logging.getLogger(__name__)


class ToggleOutcome(str, Enum):
    CREATED = "created"
    REMOVED = "removed"


class LikeService:
    """Create-if-absent / delete-if-present on the ``(post, user)`` like.

    No lock is taken. The unique constraint on ``(post_id, user_id)`` makes a
    losing concurrent create fail with ``ConflictError``, and a losing
    concurrent delete removes zero rows. Either way the call re-reads and
    tries again, so every call flips the state exactly once. A lost race
    always means another caller's flip landed, so the loop ends once the
    concurrent callers have all been served.
    """

    def __init__(self, posts: PostStore, likes: LikeStore) -> None:
        self.posts = posts
        self.likes = likes

    async def toggle(self, post_id: int, user_id: int) -> ToggleOutcome:
        if await self.posts.find_by_id(post_id) is None:
            raise NotFoundError(POST_NOT_FOUND)

        attempt = 0
        while True:
            attempt += 1
            existing = await self.likes.find_for(post_id, user_id)
            if existing is None:
                try:
                    await self.likes.create(post_id=post_id, user_id=user_id)
                except ConflictError:
                    logger.debug(
                        "Concurrent like create for post %s user %s (attempt %s)",
                        post_id,
                        user_id,
                        attempt,
                    )
                    continue
                return ToggleOutcome.CREATED

            if existing.id is not None and await self.likes.delete(existing.id):
                return ToggleOutcome.REMOVED
            logger.debug(
                "Concurrent like removal for post %s user %s (attempt %s)",
                post_id,
                user_id,
                attempt,
            )

    async def count_likes(self, post_id: int) -> int:
        return await self.likes.count_for_post(post_id)

    async def list_liked_posts(self, user_id: int) -> list[tuple[Post, str, int]]:
        return await self.posts.list_liked_by(user_id)
