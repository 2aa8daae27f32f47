"""
Simple test cases to verify test configuration.
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

@pytest.mark.asyncio
async def test_app_exists(client: AsyncClient):
    """Test that app exists."""
    assert client is not None

@pytest.mark.asyncio
async def test_database_session(async_session: AsyncSession):
    """Test that database session works."""
    result = await async_session.execute(text("SELECT 1"))
    assert result.scalar() == 1

@pytest.mark.asyncio
async def test_products_table_created(async_session: AsyncSession):
    result = await async_session.execute(text("SELECT COUNT(*) FROM products"))
    assert result.scalar() == 0
