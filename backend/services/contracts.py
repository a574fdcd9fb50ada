"""Storage interfaces the services depend on.

The SQL repositories in ``repositories`` satisfy these structurally; tests
substitute in-memory implementations.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from models import Comment, Like, Post, User


@runtime_checkable
class UserStore(Protocol):
    async def create(self, **values: Any) -> User: ...

    async def find_by_id(self, record_id: int) -> User | None: ...

    async def find_by_nickname(self, nickname: str) -> User | None: ...


@runtime_checkable
class PostStore(Protocol):
    async def create(self, **values: Any) -> Post: ...

    async def find_by_id(self, record_id: int) -> Post | None: ...

    async def find_with_author(self, post_id: int) -> tuple[Post, str] | None: ...

    async def list_with_authors(self) -> list[tuple[Post, str]]: ...

    async def list_liked_by(self, user_id: int) -> list[tuple[Post, str, int]]: ...

    async def update(self, record_id: int, **values: Any) -> Post | None: ...

    async def delete(self, record_id: int) -> bool: ...


@runtime_checkable
class CommentStore(Protocol):
    async def create(self, **values: Any) -> Comment: ...

    async def find_by_id(self, record_id: int) -> Comment | None: ...

    async def list_for_post(self, post_id: int) -> list[tuple[Comment, str]]: ...

    async def update(self, record_id: int, **values: Any) -> Comment | None: ...

    async def delete(self, record_id: int) -> bool: ...


@runtime_checkable
class LikeStore(Protocol):
    async def create(self, **values: Any) -> Like: ...

    async def find_for(self, post_id: int, user_id: int) -> Like | None: ...

    async def count_for_post(self, post_id: int) -> int: ...

    async def delete(self, record_id: int) -> bool: ...
