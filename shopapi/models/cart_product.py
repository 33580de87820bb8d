# shopapi/models/cart_product.py
from sqlmodel import SQLModel, Field


class CartProductLink(SQLModel, table=True):
    """
    Membership of a product in a cart.

    Pure set semantics: the composite primary key means a product is
    either in a cart or not. There is no quantity column.
    """

    __tablename__ = "cart_products"

    cart_id: int = Field(
        foreign_key="carts.id",
        primary_key=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        primary_key=True,
        index=True,
    )
