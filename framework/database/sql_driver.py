from sqlmodel import SQLModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from loguru import logger
from .base import BaseDatabaseDriver

class SQLDriver(BaseDatabaseDriver):
    """Async SQL driver; hands out one AsyncSession per request scope."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def connect(self):
        """Check connectivity (the engine pools connections itself)."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info(f"Database connected | Dialect: {self.engine.dialect.name}")

    async def disconnect(self):
        await self.engine.dispose()
        logger.info("Database engine disposed")

    async def create_all(self):
        """Create all tables registered in SQLModel metadata."""
        import apps.models  # noqa: F401  register table models

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def get_session(self):
        async with self.session_factory() as session:
            yield session
