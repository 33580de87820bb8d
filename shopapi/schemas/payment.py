# shopapi/schemas/payment.py
from typing import Literal

from pydantic import ConfigDict, SecretStr
from sqlmodel import SQLModel


class PaymentCreate(SQLModel):
    """
    Payment request for a cart.

    card_number is a SecretStr: it is masked in repr/str/logs and never
    serialized back to the client. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    cart_id: int
    card_number: SecretStr
    amount: float


class PaymentRead(SQLModel):
    """
    Payment outcome returned to the client.
    """

    status: Literal["success"]
    transaction_id: int
    cart_id: int
