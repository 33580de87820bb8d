# shopapi/models/category.py
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from shopapi.models.product import Product


class Category(SQLModel, table=True):
    """
    Product category.

    Products reference a category by id; the category does not own
    their lifecycle.
    """

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(
        index=True,
        description="Display name of the category",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )

    products: list["Product"] = Relationship(
        back_populates="category",
        sa_relationship_kwargs={"order_by": "Product.id"},
    )
