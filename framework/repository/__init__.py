"""
Repository pattern: data access abstraction, decouples endpoints from the database session.
"""

from .entity import Entity, EntityT
from .base import BaseRepository, IRepository
from .unit_of_work import UnitOfWork

__all__ = ["Entity", "EntityT", "BaseRepository", "IRepository", "UnitOfWork"]
