"""Comment rules.

Mutations re-check that the parent post still exists instead of trusting
the storage cascade, so a comment under a post deleted mid-request is
reported as missing.
"""

from __future__ import annotations

from core.errors import NotFoundError
from models import Comment, User
from services.contracts import CommentStore, PostStore
from services.ownership import require_owner
from services.posts import POST_NOT_FOUND
from services.validation import require_text

COMMENT_NOT_FOUND = "Comment not found"


class CommentService:
    def __init__(self, posts: PostStore, comments: CommentStore) -> None:
        self.posts = posts
        self.comments = comments

    async def _require_post(self, post_id: int) -> None:
        if await self.posts.find_by_id(post_id) is None:
            raise NotFoundError(POST_NOT_FOUND)

    async def _require_comment(self, post_id: int, comment_id: int) -> Comment:
        await self._require_post(post_id)
        comment = await self.comments.find_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFoundError(COMMENT_NOT_FOUND)
        return comment

    async def create_comment(self, principal: User, post_id: int, content: object) -> Comment:
        await self._require_post(post_id)
        normalized_content = require_text(content, "content")
        return await self.comments.create(
            post_id=post_id,
            user_id=principal.id,
            content=normalized_content,
        )

    async def list_comments(self, post_id: int) -> list[tuple[Comment, str]]:
        await self._require_post(post_id)
        return await self.comments.list_for_post(post_id)

    async def update_comment(
        self,
        principal: User,
        post_id: int,
        comment_id: int,
        content: object,
    ) -> Comment:
        comment = await self._require_comment(post_id, comment_id)
        require_owner(principal, comment, detail="Only the author can edit this comment")
        normalized_content = require_text(content, "content")

        updated = await self.comments.update(comment_id, content=normalized_content)
        if updated is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        return updated

    async def delete_comment(self, principal: User, post_id: int, comment_id: int) -> None:
        comment = await self._require_comment(post_id, comment_id)
        require_owner(principal, comment, detail="Only the author can delete this comment")
        if not await self.comments.delete(comment_id):
            raise NotFoundError(COMMENT_NOT_FOUND)
