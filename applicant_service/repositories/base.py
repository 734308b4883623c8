"""Base Repository.

Generic data access operations shared by the applicant repositories:
primary-key lookup, foreign-key equality lookup, list, create and partial
update. Writes only flush; committing is left to ``safe_transaction``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Repository bound to one ORM model and one session."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, record_id: int) -> ModelT | None:
        """Find a record by primary key.

        Args:
            record_id: Primary key value

        Returns:
            The record if found, None otherwise
        """
        return await self.db.get(self.model, record_id)

    async def find_one_by(self, **filters: Any) -> ModelT | None:
        """Find the first record whose columns equal the given values."""
        query = select(self.model).filter_by(**filters).limit(1)
        result = await self.db.execute(query)
        return result.scalars().first()

    async def list(self) -> list[ModelT]:
        """Return every record, unfiltered and in storage order."""
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())

    async def create(self, entity: ModelT) -> ModelT:
        """Add a new record and flush it so its primary key is assigned.

        Args:
            entity: Entity to create

        Returns:
            Created entity
        """
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity: ModelT, values: dict[str, Any]) -> ModelT:
        """Apply a partial update; columns not in ``values`` are left as they are.

        Args:
            entity: Entity to update
            values: Column name to new value

        Returns:
            Updated entity, refreshed from the database
        """
        for column, value in values.items():
            setattr(entity, column, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity
