"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, List, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from .entity import EntityT as T


class IRepository(ABC, Generic[T]):
    """Repository interface; defines the standard CRUD API for one entity type."""

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get every persisted entity."""
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, or None if absent."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Stage entity for insertion."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Stage entity for replacement of its persisted state."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage entity for removal."""
        pass

    @abstractmethod
    async def save(self) -> None:
        """Commit all staged changes as one unit."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation on a SQLModel AsyncSession.

    Mutations are only staged in the session; nothing is durable until save().
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def get_all(self) -> List[T]:
        statement = select(self.model)
        result = await self.session.exec(statement)
        return list(result.all())

    async def get_by_id(self, id: int) -> Optional[T]:
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def add(self, entity: T) -> T:
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Merge a detached instance; returns the instance tracked by the session."""
        return await self.session.merge(entity)

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)

    async def save(self) -> None:
        """Commit; on failure roll the session back and re-raise as-is."""
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
