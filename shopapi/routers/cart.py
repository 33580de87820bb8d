# shopapi/routers/cart.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from shopapi.database import get_session
from shopapi.repositories.cart_repo import CartRepository
from shopapi.repositories.product_repo import ProductRepository
from shopapi.schemas.cart import CartProductAdd, CartRead
from shopapi.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Carts"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.post("", response_model=CartRead, status_code=status.HTTP_201_CREATED)
def create_cart(session: Session = Depends(get_session)):
    """
    Create an empty cart.
    """
    return service.create_cart(session)


@router.get("/{cart_id}", response_model=CartRead)
def get_cart(
    cart_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a cart with its products.
    """
    return service.get_cart(session, cart_id)


@router.post("/{cart_id}/products", response_model=CartRead)
def add_product_to_cart(
    cart_id: int,
    payload: CartProductAdd,
    session: Session = Depends(get_session),
):
    """
    Add a product to the cart.

    Adding a product that is already in the cart changes nothing.
    Returns the updated cart.
    """
    return service.add_product(session, cart_id, payload)


@router.delete("/{cart_id}/products/{product_id}", response_model=CartRead)
def remove_product_from_cart(
    cart_id: int,
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Remove a product from the cart.

    Removing a product that is not in the cart changes nothing.
    Returns the updated cart.
    """
    return service.remove_product(session, cart_id, product_id)
