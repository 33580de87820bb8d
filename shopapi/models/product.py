# shopapi/models/product.py
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlmodel import SQLModel, Field, Relationship

from shopapi.models.cart_product import CartProductLink

if TYPE_CHECKING:
    from shopapi.models.cart import Cart
    from shopapi.models.category import Category


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Columns:
      - id, name, description, price, category_id,
        created_at, updated_at
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(
        index=True,
        description="Display name of the product",
    )

    description: str = Field(
        default="",
        description="Free-form description",
    )

    price: float = Field(
        default=0,
        ge=0,
        description="Unit price",
    )

    category_id: int = Field(
        foreign_key="categories.id",
        index=True,
        description="FK to categories.id",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )

    category: Optional["Category"] = Relationship(back_populates="products")

    # Deleting a product also drops its cart_products rows.
    carts: list["Cart"] = Relationship(
        back_populates="products",
        link_model=CartProductLink,
    )
