"""Like toggle and liked-post endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_like_service, principal_id
from models import User
from services import LikeService, ToggleOutcome
from .post_views import LikedPostListEnvelope, LikedPostResponse, PostSummaryResponse

router = APIRouter(prefix="/posts", tags=["likes"])

TOGGLE_MESSAGES = {
    ToggleOutcome.CREATED: "Liked the post",
    ToggleOutcome.REMOVED: "Removed the like from the post",
}


@router.get("/like", response_model=LikedPostListEnvelope)
async def list_liked_posts(
    current_user: User = Depends(get_current_user),
    likes: LikeService = Depends(get_like_service),
) -> LikedPostListEnvelope:
    rows = await likes.list_liked_posts(principal_id(current_user))
    return LikedPostListEnvelope(
        data=[
            LikedPostResponse(
                **PostSummaryResponse.from_post(post, nickname).model_dump(),
                like_count=like_count,
            )
            for post, nickname, like_count in rows
        ]
    )


@router.put("/{post_id}/like")
async def toggle_like(
    post_id: int,
    current_user: User = Depends(get_current_user),
    likes: LikeService = Depends(get_like_service),
) -> dict[str, Any]:
    outcome = await likes.toggle(post_id, principal_id(current_user))
    like_count = await likes.count_likes(post_id)
    return {
        "message": TOGGLE_MESSAGES[outcome],
        "liked": outcome is ToggleOutcome.CREATED,
        "like_count": like_count,
    }
