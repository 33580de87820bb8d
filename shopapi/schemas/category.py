# shopapi/schemas/category.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel


class CategoryCreate(SQLModel):
    """
    Payload for creating a category.

    Missing fields fall back to empty values and unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""


class CategoryUpdate(SQLModel):
    """
    Overlay update payload for categories.

    Unknown keys are ignored so a client can PUT back a record it
    fetched earlier (id, timestamps, products).
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class CategoryRead(SQLModel):
    """
    Category representation without its products.
    """

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
