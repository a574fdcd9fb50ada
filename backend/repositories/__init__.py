"""Storage access layer; the only code that issues queries."""

from .base import SQLModelRepository
from .comments import CommentRepository, CommentRow
from .likes import LikeRepository
from .posts import LikedPostRow, PostRepository, PostRow
from .users import UserRepository

__all__ = [
    "SQLModelRepository",
    "UserRepository",
    "PostRepository",
    "PostRow",
    "LikedPostRow",
    "CommentRepository",
    "CommentRow",
    "LikeRepository",
]
