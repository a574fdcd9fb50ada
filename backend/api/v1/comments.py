"""Comment endpoints nested under a post."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from api.deps import get_comment_service, get_current_user
from models import User
from services import CommentService
from .post_views import CommentEnvelope, CommentListEnvelope, CommentResponse

router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])


class CommentWriteRequest(BaseModel):
    content: str | None = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CommentEnvelope)
async def create_comment(
    post_id: int,
    payload: CommentWriteRequest,
    current_user: User = Depends(get_current_user),
    comments: CommentService = Depends(get_comment_service),
) -> CommentEnvelope:
    comment = await comments.create_comment(current_user, post_id, payload.content)
    return CommentEnvelope(data=CommentResponse.from_comment(comment, current_user.nickname))


@router.get("", response_model=CommentListEnvelope)
async def list_comments(
    post_id: int,
    comments: CommentService = Depends(get_comment_service),
) -> CommentListEnvelope:
    rows = await comments.list_comments(post_id)
    return CommentListEnvelope(
        data=[CommentResponse.from_comment(comment, nickname) for comment, nickname in rows]
    )


@router.put("/{comment_id}", response_model=CommentEnvelope)
async def update_comment(
    post_id: int,
    comment_id: int,
    payload: CommentWriteRequest,
    current_user: User = Depends(get_current_user),
    comments: CommentService = Depends(get_comment_service),
) -> CommentEnvelope:
    comment = await comments.update_comment(current_user, post_id, comment_id, payload.content)
    return CommentEnvelope(data=CommentResponse.from_comment(comment, current_user.nickname))


@router.delete("/{comment_id}", status_code=status.HTTP_200_OK)
async def delete_comment(
    post_id: int,
    comment_id: int,
    current_user: User = Depends(get_current_user),
    comments: CommentService = Depends(get_comment_service),
) -> dict[str, str]:
    await comments.delete_comment(current_user, post_id, comment_id)
    return {"detail": "Deleted"}
