"""Product module repository implementation."""

from framework.repository.base import BaseRepository
from .models import Product


class ProductRepository(BaseRepository[Product]):
    """Product repository."""

    def __init__(self, session):
        super().__init__(session, Product)
