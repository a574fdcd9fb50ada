"""Generic storage operations shared by every repository."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar, cast

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement
from sqlmodel import SQLModel

from core.errors import ConflictError
from db.errors import is_unique_violation

ModelT = TypeVar("ModelT", bound=SQLModel)


def _eq(column: Any, value: Any) -> ColumnElement[bool]:
    return cast(ColumnElement[bool], column == value)


def _desc(column: Any) -> Any:
    return cast(Any, column).desc()


class SQLModelRepository(Generic[ModelT]):
    """Single-table CRUD over an injected ``AsyncSession``.

    Every mutating call commits on its own, so each create, update or delete
    is atomic. Unique-constraint violations surface as ``ConflictError``;
    any other storage fault propagates unchanged.
    """

    model: ClassVar[type[SQLModel]]
    conflict_detail: ClassVar[str] = "Resource already exists"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _id_column(self) -> Any:
        return cast(Any, self.model).id

    async def create(self, **values: Any) -> ModelT:
        record = cast(ModelT, self.model(**values))
        self.session.add(record)
        await self._commit()
        await self.session.refresh(record)
        return record

    async def find_by_id(self, record_id: int) -> ModelT | None:
        result = await self.session.execute(
            select(cast(Any, self.model)).where(_eq(self._id_column, record_id)).limit(1)
        )
        return cast(ModelT | None, result.scalar_one_or_none())

    async def update(self, record_id: int, **values: Any) -> ModelT | None:
        record = await self.find_by_id(record_id)
        if record is None:
            return None
        for field_name, value in values.items():
            setattr(record, field_name, value)
        self.session.add(record)
        await self._commit()
        await self.session.refresh(record)
        return record

    async def delete(self, record_id: int) -> bool:
        """Delete by primary key; False when the row was already gone."""
        result = await self.session.execute(
            delete(self.model).where(_eq(self._id_column, record_id))
        )
        await self._commit()
        return cast(int, getattr(result, "rowcount", 0) or 0) > 0

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise ConflictError(self.conflict_detail) from exc
            raise
