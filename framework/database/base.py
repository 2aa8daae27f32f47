from abc import ABC, abstractmethod
from typing import AsyncIterator
from sqlmodel.ext.asyncio.session import AsyncSession


class BaseDatabaseDriver(ABC):
    """Lifecycle and session contract for a relational backend."""

    @abstractmethod
    async def connect(self) -> None:
        """Verify the backend is reachable."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Release pooled connections."""

    @abstractmethod
    def get_session(self) -> AsyncIterator[AsyncSession]:
        """Yield one session for the caller's scope, closing it afterwards."""
