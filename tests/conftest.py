"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.repository.unit_of_work import UnitOfWork
from apps.products.models import Product
from apps.products.repository import ProductRepository


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session on a fresh schema."""
    import apps.models  # noqa: F401  register table models

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def uow(async_session: AsyncSession) -> UnitOfWork:
    return UnitOfWork(session=async_session)


@pytest.fixture
def product_repo(async_session: AsyncSession) -> ProductRepository:
    return ProductRepository(async_session)


@pytest.fixture
async def client(
    async_session: AsyncSession
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the test session."""
    from apps.products.api.router import get_db

    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def sample_product(async_session: AsyncSession) -> Product:
    """Create sample product."""
    product = Product(name="Widget", price=9.99)
    async_session.add(product)
    await async_session.commit()
    await async_session.refresh(product)
    return product
