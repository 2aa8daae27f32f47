"""
Unit of Work: manages repositories and transaction boundaries.
"""

from typing import Dict, Optional, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from .base import BaseRepository
from .entity import Entity


class UnitOfWork:
    """Manages related repositories with a shared session and transaction commit/rollback."""

    def __init__(self, session: Optional[AsyncSession] = None):
        """Initialize UnitOfWork; session must be provided (see get_uow in the routers)."""
        if session is None:
            raise ValueError("Session must be provided.")

        self.session = session
        self._repositories: Dict[Type[Entity], BaseRepository] = {}

    def get_repository(self, model_class: Type[Entity], repo_class: Optional[type] = None) -> BaseRepository:
        """Get or create the repository for an entity type (one per model, cached).

        A cached repository that is not an instance of repo_class raises ValueError.
        repo_class must accept the session as its only argument; without it a plain
        BaseRepository bound to model_class is created.
        """
        cached = self._repositories.get(model_class)
        if cached is not None:
            if repo_class is not None and not isinstance(cached, repo_class):
                raise ValueError(
                    f"{model_class.__name__} is already served by {type(cached).__name__}, not {repo_class.__name__}"
                )
            return cached

        if repo_class is None:
            repo = BaseRepository(self.session, model_class)
        else:
            repo = repo_class(self.session)
            if repo.model is not model_class:
                raise ValueError(
                    f"{repo_class.__name__} manages {repo.model.__name__}, not {model_class.__name__}"
                )
        self._repositories[model_class] = repo
        return repo

    @property
    def has_changes(self) -> bool:
        """Whether the session holds staged additions, updates or removals."""
        return bool(self.session.new or self.session.dirty or self.session.deleted)

    async def commit(self) -> None:
        """Commit all changes."""
        await self.session.commit()

    async def save(self) -> None:
        """Commit all staged changes; rolls back and re-raises on failure."""
        try:
            await self.commit()
        except SQLAlchemyError:
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        await self.session.flush()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self.rollback()
        else:
            await self.save()
