"""Post endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from api.deps import get_current_user, get_post_service
from models import User
from services import PostService
from .post_views import PostEnvelope, PostListEnvelope, PostResponse, PostSummaryResponse

router = APIRouter(prefix="/posts", tags=["posts"])


class PostWriteRequest(BaseModel):
    title: str | None = None
    content: str | None = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostEnvelope)
async def create_post(
    payload: PostWriteRequest,
    current_user: User = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
) -> PostEnvelope:
    post = await posts.create_post(current_user, payload.title, payload.content)
    return PostEnvelope(data=PostResponse.from_post(post, current_user.nickname))


@router.get("", response_model=PostListEnvelope)
async def list_posts(posts: PostService = Depends(get_post_service)) -> PostListEnvelope:
    rows = await posts.list_posts()
    return PostListEnvelope(
        data=[PostSummaryResponse.from_post(post, nickname) for post, nickname in rows]
    )


@router.get("/{post_id}", response_model=PostEnvelope)
async def get_post(
    post_id: int,
    posts: PostService = Depends(get_post_service),
) -> PostEnvelope:
    post, nickname = await posts.get_post(post_id)
    return PostEnvelope(data=PostResponse.from_post(post, nickname))


@router.put("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: int,
    payload: PostWriteRequest,
    current_user: User = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
) -> PostEnvelope:
    post = await posts.update_post(current_user, post_id, payload.title, payload.content)
    return PostEnvelope(data=PostResponse.from_post(post, current_user.nickname))


@router.delete("/{post_id}", status_code=status.HTTP_200_OK)
async def delete_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
) -> dict[str, str]:
    await posts.delete_post(current_user, post_id)
    return {"detail": "Deleted"}
