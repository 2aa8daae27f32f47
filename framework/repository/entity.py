"""
Entity contract: every persisted model exposes an integer identifier.
"""

from typing import Optional, TypeVar
from sqlmodel import SQLModel, Field


class Entity(SQLModel):
    """Base for table models; declares the integer primary key."""

    id: Optional[int] = Field(default=None, primary_key=True)


EntityT = TypeVar("EntityT", bound=Entity)
