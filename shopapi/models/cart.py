# shopapi/models/cart.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field, Relationship

from shopapi.models.cart_product import CartProductLink
from shopapi.models.product import Product


class Cart(SQLModel, table=True):
    """
    Shopping cart.

    A cart does not own its products: membership lives in
    cart_products and a product can sit in any number of carts.
    """

    __tablename__ = "carts"

    id: int | None = Field(default=None, primary_key=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    products: list[Product] = Relationship(
        back_populates="carts",
        link_model=CartProductLink,
        sa_relationship_kwargs={"order_by": "Product.id"},
    )
