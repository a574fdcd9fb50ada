"""Business logic services."""

from .accounts import AccountService
from .comments import CommentService
from .likes import LikeService, ToggleOutcome
from .ownership import allow, require_owner
from .posts import PostService

__all__ = [
    "AccountService",
    "CommentService",
    "LikeService",
    "ToggleOutcome",
    "PostService",
    "allow",
    "require_owner",
]
