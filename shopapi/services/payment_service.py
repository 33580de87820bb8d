# shopapi/services/payment_service.py
import logging
import time

from shopapi.schemas.payment import PaymentCreate, PaymentRead

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Payment stub.

    No card validation, no charge, nothing persisted. The card number
    stays a SecretStr and is never read here.
    """

    def process_payment(self, payload: PaymentCreate) -> PaymentRead:
        transaction_id = time.time_ns()
        logger.info(
            "Accepted payment %s for cart %s (amount=%s)",
            transaction_id,
            payload.cart_id,
            payload.amount,
        )
        return PaymentRead(
            status="success",
            transaction_id=transaction_id,
            cart_id=payload.cart_id,
        )
