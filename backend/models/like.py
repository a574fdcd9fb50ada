"""Post like model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlmodel import Field, SQLModel

LIKE_UNIQUE_CONSTRAINT = "ux_likes_post_user"


class Like(SQLModel, table=True):
    """Tracks which users liked which posts.

    At most one row may exist per ``(post_id, user_id)``; the like toggle
    relies on this constraint to detect concurrent creates.
    """

    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name=LIKE_UNIQUE_CONSTRAINT),
    )

    id: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    post_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        )
    )
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    created_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )
    )
