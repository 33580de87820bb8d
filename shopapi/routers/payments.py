# shopapi/routers/payments.py
from fastapi import APIRouter

from shopapi.schemas.payment import PaymentCreate, PaymentRead
from shopapi.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"])

service = PaymentService()


@router.post("", response_model=PaymentRead)
def process_payment(payload: PaymentCreate):
    """
    Mock payment: always succeeds and returns a time-based transaction id.
    Nothing is charged or stored.
    """
    return service.process_payment(payload)
