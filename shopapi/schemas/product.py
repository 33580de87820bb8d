# shopapi/schemas/product.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from shopapi.schemas.category import CategoryRead


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    - category_id must point at an existing category.
    - Other fields are optional; unknown keys (id, nested category, ...)
      are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str = ""
    price: float = Field(default=0, ge=0)
    category_id: int


class ProductUpdate(SQLModel):
    """
    Overlay update payload for products.
    All fields are optional; fields left out keep their stored value.

    Unknown keys (id, created_at, nested category, ...) are ignored so a
    fetched record can be sent back as-is.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category_id: int | None = None


class ProductRead(SQLModel):
    """
    Product representation without nested relations.
    Used inside carts and category listings.
    """

    id: int
    name: str
    description: str
    price: float
    category_id: int
    created_at: datetime
    updated_at: datetime


class ProductReadWithCategory(ProductRead):
    """
    Product representation for clients, with its category.
    """

    category: CategoryRead | None = None


class CategoryReadWithProducts(CategoryRead):
    """
    Category representation with every product that references it.
    """

    products: list[ProductRead] = []
