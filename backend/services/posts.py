"""Post rules: shape checks, existence, and owner-only mutation."""

from __future__ import annotations

from core.errors import NotFoundError
from models import Post, User
from services.contracts import PostStore
from services.ownership import require_owner
from services.validation import require_text

MAX_POST_TITLE_LENGTH = 255
POST_NOT_FOUND = "Post not found"


class PostService:
    def __init__(self, posts: PostStore) -> None:
        self.posts = posts

    async def require_post(self, post_id: int) -> Post:
        post = await self.posts.find_by_id(post_id)
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    async def create_post(self, principal: User, title: object, content: object) -> Post:
        normalized_title = require_text(title, "title", max_length=MAX_POST_TITLE_LENGTH)
        normalized_content = require_text(content, "content")
        return await self.posts.create(
            user_id=principal.id,
            title=normalized_title,
            content=normalized_content,
        )

    async def list_posts(self) -> list[tuple[Post, str]]:
        return await self.posts.list_with_authors()

    async def get_post(self, post_id: int) -> tuple[Post, str]:
        row = await self.posts.find_with_author(post_id)
        if row is None:
            raise NotFoundError(POST_NOT_FOUND)
        return row

    async def update_post(
        self,
        principal: User,
        post_id: int,
        title: object,
        content: object,
    ) -> Post:
        post = await self.require_post(post_id)
        require_owner(principal, post, detail="Only the author can edit this post")
        normalized_title = require_text(title, "title", max_length=MAX_POST_TITLE_LENGTH)
        normalized_content = require_text(content, "content")

        updated = await self.posts.update(
            post_id,
            title=normalized_title,
            content=normalized_content,
        )
        if updated is None:
            raise NotFoundError(POST_NOT_FOUND)
        return updated

    async def delete_post(self, principal: User, post_id: int) -> None:
        post = await self.require_post(post_id)
        require_owner(principal, post, detail="Only the author can delete this post")
        if not await self.posts.delete(post_id):
            raise NotFoundError(POST_NOT_FOUND)
