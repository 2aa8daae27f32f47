from typing import List
from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.exceptions.handler import BadRequestException, NotFoundException
from framework.logging.logger import get_logger
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ..models import Product, ProductCreate, ProductUpdate
from ..repository import ProductRepository

router = APIRouter()
logger = get_logger("products")

async def get_db():
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

def get_uow(
    db: AsyncSession = Depends(get_db)
) -> UnitOfWork:
    """Dependency: create UnitOfWork."""
    return UnitOfWork(session=db)

def get_product_repository(
    uow: UnitOfWork = Depends(get_uow)
) -> ProductRepository:
    """Dependency: product repository from the request's UnitOfWork."""
    return uow.get_repository(Product, ProductRepository)


async def _get_or_404(repo: ProductRepository, product_id: int) -> Product:
    product = await repo.get_by_id(product_id)
    if product is None:
        raise NotFoundException(f"Product {product_id} not found")
    return product


@router.get("", response_model=ResponseModel)
async def list_products(repo: ProductRepository = Depends(get_product_repository)):
    """List all products."""
    products: List[Product] = await repo.get_all()
    return ResponseModel.success(data=products)

@router.get("/{product_id}", name="get_product", response_model=ResponseModel)
async def get_product(
    product_id: int,
    repo: ProductRepository = Depends(get_product_repository)
):
    product = await _get_or_404(repo, product_id)
    return ResponseModel.success(data=product)

@router.post("", status_code=status.HTTP_201_CREATED, response_model=ResponseModel)
async def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    repo: ProductRepository = Depends(get_product_repository)
):
    """Create a product; Location header points at the new resource."""
    product = await repo.add(Product(**payload.model_dump()))
    await repo.save()
    logger.info(f"Product {product.id} created")

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ResponseModel.success(data=product, code=201)

@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """Replace a product. Path and body ids must agree."""
    if payload.id != product_id:
        raise BadRequestException(f"Path id {product_id} does not match body id {payload.id}")

    await _get_or_404(repo, product_id)
    await repo.update(Product(**payload.model_dump()))
    await repo.save()
    logger.info(f"Product {product_id} updated")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    repo: ProductRepository = Depends(get_product_repository)
):
    product = await _get_or_404(repo, product_id)
    await repo.delete(product)
    await repo.save()
    logger.info(f"Product {product_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
