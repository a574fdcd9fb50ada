"""Version 1 routers."""

from fastapi import APIRouter

from . import auth, comments, likes, posts

api_router = APIRouter()
api_router.include_router(auth.router)
# /posts/like must be matched before /posts/{post_id}.
api_router.include_router(likes.router)
api_router.include_router(posts.router)
api_router.include_router(comments.router)

__all__ = ["api_router"]
