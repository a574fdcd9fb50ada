"""Pytest fixtures for the bulletin board backend."""

import asyncio
import os
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generic, TypeVar

# Settings refuse to load without a signing key; set one before any app import.
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-board-backend-0123456789")
os.environ.setdefault("APP_ENV", "test")

from alembic import command
from alembic.config import Config
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from app import create_app
from core import ConflictError, TokenService
from core.config import settings
from db import create_engine, create_session_maker
from models import Comment, Like, Post, User

ModelT = TypeVar("ModelT", bound=SQLModel)


def _run_alembic_migrations(database_url: str) -> None:
    """Apply Alembic migrations to the given database URL."""
    backend_dir = Path(__file__).resolve().parents[1]
    alembic_cfg = Config(str(backend_dir / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(backend_dir / "alembic"))

    original_database_url = settings.database_url
    try:
        settings.database_url = database_url
        command.upgrade(alembic_cfg, "head")
    finally:
        settings.database_url = original_database_url


@pytest.fixture(scope="session")
def test_database_url(tmp_path_factory) -> str:
    """Create and migrate a file-backed SQLite database for tests."""
    db_dir = tmp_path_factory.mktemp("sqlite")
    db_path = db_dir / "board-test.db"
    database_url = f"sqlite+aiosqlite:///{db_path}"
    _run_alembic_migrations(database_url)
    return database_url


@pytest_asyncio.fixture()
async def session_maker(test_database_url: str) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory on the migrated database, with every table emptied first."""
    engine = create_engine(test_database_url)
    maker = create_session_maker(engine)
    async with maker() as session:
        for table in reversed(SQLModel.metadata.sorted_tables):
            await session.execute(table.delete())
        await session.commit()
    yield maker
    await engine.dispose()


@pytest.fixture()
def token_service() -> TokenService:
    return TokenService(settings.secret_key)


@pytest.fixture()
def app(session_maker, token_service: TokenService) -> FastAPI:
    """Create the FastAPI app bound to the test database."""
    return create_app(session_maker=session_maker, token_service=token_service)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Return an HTTPX async client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture()
async def db_session(session_maker) -> AsyncIterator[AsyncSession]:
    """Provide a raw database session to tests."""
    async with session_maker() as session:
        yield session


class InMemoryRepository(Generic[ModelT]):
    """Dict-backed stand-in for ``SQLModelRepository``.

    Every operation yields to the event loop first, so concurrent callers
    interleave at the same points they would against a real database.
    """

    def __init__(self, model: type[ModelT], *, unique_on: tuple[str, ...] = ()) -> None:
        self.model = model
        self.unique_on = unique_on
        self.rows: dict[int, ModelT] = {}
        self._next_id = 1

    async def create(self, **values: Any) -> ModelT:
        await asyncio.sleep(0)
        if self.unique_on:
            key = tuple(values[name] for name in self.unique_on)
            for row in self.rows.values():
                if tuple(getattr(row, name) for name in self.unique_on) == key:
                    raise ConflictError()
        now = datetime.now(timezone.utc)
        timestamps = {
            name: now for name in ("created_at", "updated_at") if name in self.model.model_fields
        }
        record = self.model(id=self._next_id, **timestamps, **values)
        self.rows[self._next_id] = record
        self._next_id += 1
        return record

    async def find_by_id(self, record_id: int) -> ModelT | None:
        await asyncio.sleep(0)
        return self.rows.get(record_id)

    async def update(self, record_id: int, **values: Any) -> ModelT | None:
        await asyncio.sleep(0)
        record = self.rows.get(record_id)
        if record is None:
            return None
        for name, value in values.items():
            setattr(record, name, value)
        return record

    async def delete(self, record_id: int) -> bool:
        await asyncio.sleep(0)
        return self.rows.pop(record_id, None) is not None


class InMemoryUserRepository(InMemoryRepository[User]):
    def __init__(self) -> None:
        super().__init__(User, unique_on=("nickname",))

    async def find_by_nickname(self, nickname: str) -> User | None:
        await asyncio.sleep(0)
        return next((user for user in self.rows.values() if user.nickname == nickname), None)


class InMemoryLikeRepository(InMemoryRepository[Like]):
    def __init__(self) -> None:
        super().__init__(Like, unique_on=("post_id", "user_id"))

    async def find_for(self, post_id: int, user_id: int) -> Like | None:
        await asyncio.sleep(0)
        return next(
            (
                like
                for like in self.rows.values()
                if like.post_id == post_id and like.user_id == user_id
            ),
            None,
        )

    async def count_for_post(self, post_id: int) -> int:
        await asyncio.sleep(0)
        return sum(1 for like in self.rows.values() if like.post_id == post_id)


class InMemoryCommentRepository(InMemoryRepository[Comment]):
    def __init__(self, users: InMemoryUserRepository) -> None:
        super().__init__(Comment)
        self.users = users

    async def list_for_post(self, post_id: int) -> list[tuple[Comment, str]]:
        await asyncio.sleep(0)
        comments = sorted(
            (comment for comment in self.rows.values() if comment.post_id == post_id),
            key=lambda comment: comment.id or 0,
            reverse=True,
        )
        return [(comment, self.users.rows[comment.user_id].nickname) for comment in comments]


class InMemoryPostRepository(InMemoryRepository[Post]):
    def __init__(
        self,
        users: InMemoryUserRepository,
        comments: InMemoryCommentRepository,
        likes: InMemoryLikeRepository,
    ) -> None:
        super().__init__(Post)
        self.users = users
        self.comments = comments
        self.likes = likes

    def _nickname(self, post: Post) -> str:
        return self.users.rows[post.user_id].nickname

    async def find_with_author(self, post_id: int) -> tuple[Post, str] | None:
        post = await self.find_by_id(post_id)
        if post is None:
            return None
        return post, self._nickname(post)

    async def list_with_authors(self) -> list[tuple[Post, str]]:
        await asyncio.sleep(0)
        posts = sorted(self.rows.values(), key=lambda post: post.id or 0, reverse=True)
        return [(post, self._nickname(post)) for post in posts]

    async def list_liked_by(self, user_id: int) -> list[tuple[Post, str, int]]:
        await asyncio.sleep(0)
        liked_ids = {like.post_id for like in self.likes.rows.values() if like.user_id == user_id}
        rows = []
        for post_id in liked_ids:
            post = self.rows[post_id]
            count = sum(1 for like in self.likes.rows.values() if like.post_id == post_id)
            rows.append((post, self._nickname(post), count))
        rows.sort(key=lambda row: (row[2], row[0].id or 0), reverse=True)
        return rows

    async def delete(self, record_id: int) -> bool:
        for like_id in [key for key, like in self.likes.rows.items() if like.post_id == record_id]:
            del self.likes.rows[like_id]
        for comment_id in [
            key for key, comment in self.comments.rows.items() if comment.post_id == record_id
        ]:
            del self.comments.rows[comment_id]
        return await super().delete(record_id)


@dataclass
class InMemoryBoard:
    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    likes: InMemoryLikeRepository = field(default_factory=InMemoryLikeRepository)
    comments: InMemoryCommentRepository = field(init=False)
    posts: InMemoryPostRepository = field(init=False)

    def __post_init__(self) -> None:
        self.comments = InMemoryCommentRepository(self.users)
        self.posts = InMemoryPostRepository(self.users, self.comments, self.likes)

    async def add_user(self, nickname: str) -> User:
        return await self.users.create(nickname=nickname, password_hash="not-a-bcrypt-hash")

    async def add_post(self, author: User, title: str = "title", content: str = "content") -> Post:
        return await self.posts.create(user_id=author.id, title=title, content=content)


@pytest.fixture()
def board() -> InMemoryBoard:
    """In-memory repositories for service-level tests."""
    return InMemoryBoard()

