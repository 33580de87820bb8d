# shopapi/schemas/cart.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel

from shopapi.schemas.product import ProductRead


class CartProductAdd(SQLModel):
    """
    Payload for adding a product to a cart.
    """

    model_config = ConfigDict(extra="ignore")

    product_id: int


class CartRead(SQLModel):
    """
    Cart response model with its current membership set.
    """

    id: int
    products: list[ProductRead] = []
    created_at: datetime
    updated_at: datetime
