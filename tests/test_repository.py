"""Generic repository test cases."""
import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.repository.base import BaseRepository, IRepository
from apps.products.models import Product
from apps.products.repository import ProductRepository


class TestRead:

    @pytest.mark.asyncio
    async def test_get_all_empty(self, product_repo: ProductRepository):
        assert await product_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_returns_every_row(self, product_repo: ProductRepository):
        for i in range(3):
            await product_repo.add(Product(name=f"P{i}", price=float(i)))
        await product_repo.save()

        products = await product_repo.get_all()
        assert sorted(p.name for p in products) == ["P0", "P1", "P2"]

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, product_repo: ProductRepository):
        assert await product_repo.get_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_get_by_id(self, product_repo: ProductRepository, sample_product: Product):
        found = await product_repo.get_by_id(sample_product.id)
        assert found is not None
        assert found.name == "Widget"
        assert found.price == pytest.approx(9.99)


class TestMutations:

    @pytest.mark.asyncio
    async def test_add_then_save_is_retrievable(self, product_repo: ProductRepository):
        product = await product_repo.add(Product(name="A", price=1.0))
        await product_repo.save()

        assert product.id is not None
        found = await product_repo.get_by_id(product.id)
        assert found.name == "A"
        assert found.price == 1.0

    @pytest.mark.asyncio
    async def test_add_without_save_is_not_durable(
        self,
        product_repo: ProductRepository,
        async_session: AsyncSession
    ):
        await product_repo.add(Product(name="Draft", price=1.0))
        await async_session.rollback()

        assert await product_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_update_replaces_state(self, product_repo: ProductRepository, sample_product: Product):
        tracked = await product_repo.update(Product(id=sample_product.id, name="Gadget", price=19.5))
        await product_repo.save()

        assert tracked.id == sample_product.id
        found = await product_repo.get_by_id(sample_product.id)
        assert found.name == "Gadget"
        assert found.price == 19.5

    @pytest.mark.asyncio
    async def test_delete_then_save_removes(self, product_repo: ProductRepository, sample_product: Product):
        await product_repo.delete(sample_product)
        await product_repo.save()

        assert await product_repo.get_by_id(sample_product.id) is None

    @pytest.mark.asyncio
    async def test_save_without_changes_is_noop(self, product_repo: ProductRepository, sample_product: Product):
        before = [(p.id, p.name, p.price) for p in await product_repo.get_all()]
        await product_repo.save()
        after = [(p.id, p.name, p.price) for p in await product_repo.get_all()]
        assert before == after


class TestSaveFailure:

    @pytest.mark.asyncio
    async def test_failed_save_propagates_and_rolls_back(self, product_repo: ProductRepository):
        await product_repo.add(Product(name="Valid", price=1.0))
        await product_repo.add(Product(name=None, price=2.0))

        with pytest.raises(IntegrityError):
            await product_repo.save()

        # Neither row was committed and the session is usable again
        assert await product_repo.get_all() == []


@pytest.mark.asyncio
async def test_base_repository_implements_contract(async_session: AsyncSession):
    repo = BaseRepository(async_session, Product)
    assert isinstance(repo, IRepository)
    assert repo.model is Product


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        IRepository()
