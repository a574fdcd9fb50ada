"""SQLModel models package."""

from .comment import Comment
from .like import LIKE_UNIQUE_CONSTRAINT, Like
from .post import Post
from .user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "LIKE_UNIQUE_CONSTRAINT",
]
