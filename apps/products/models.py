from sqlmodel import SQLModel, Field
from framework.repository.entity import Entity


class ProductBase(SQLModel):
    name: str = Field(max_length=255, description="Product name")
    price: float = Field(description="Unit price")


class Product(Entity, ProductBase, table=True):
    """Product model."""
    __tablename__ = "products"


class ProductCreate(ProductBase):
    """POST body."""


class ProductUpdate(ProductBase):
    """PUT body; id must match the path id."""
    id: int
