"""Shared post/comment view models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from models import Comment, Post


class PostSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    nickname: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, nickname: str) -> "PostSummaryResponse":
        if post.id is None:
            raise ValueError("Post record missing identifier")
        return cls(
            id=post.id,
            user_id=post.user_id,
            nickname=nickname,
            title=post.title,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostResponse(PostSummaryResponse):
    content: str

    @classmethod
    def from_post(cls, post: Post, nickname: str) -> "PostResponse":
        if post.id is None:
            raise ValueError("Post record missing identifier")
        return cls(
            id=post.id,
            user_id=post.user_id,
            nickname=nickname,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class LikedPostResponse(PostSummaryResponse):
    like_count: int = 0


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    user_id: int
    nickname: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment, nickname: str) -> "CommentResponse":
        if comment.id is None:
            raise ValueError("Comment record missing identifier")
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            nickname=nickname,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostEnvelope(BaseModel):
    data: PostResponse


class PostListEnvelope(BaseModel):
    data: list[PostSummaryResponse]


class LikedPostListEnvelope(BaseModel):
    data: list[LikedPostResponse]


class CommentEnvelope(BaseModel):
    data: CommentResponse


class CommentListEnvelope(BaseModel):
    data: list[CommentResponse]


PostResponse.model_rebuild()
CommentResponse.model_rebuild()
