# shopapi/services/cart_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from shopapi.models.cart import Cart
from shopapi.models.product import Product
from shopapi.repositories.cart_repo import CartRepository
from shopapi.repositories.product_repo import ProductRepository
from shopapi.schemas.cart import CartProductAdd

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for carts and their product membership.

    Responsibilities:
      - membership is a set: adding a member twice is a no-op
      - removing a non-member is a no-op, not an error
      - add/remove load the cart and the product and mutate the
        membership in a single transaction; a missing cart or product
        aborts the whole operation with 404
      - responses always reflect the committed membership
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    def _get_cart(
        self, session: Session, cart_id: int, for_update: bool = False
    ) -> Cart:
        cart = self.cart_repo.get_by_id(session, cart_id, for_update=for_update)
        if not cart:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart not found",
            )
        return cart

    def _get_product(self, session: Session, product_id: int) -> Product:
        product = self.product_repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def _reload(self, session: Session, cart_id: int) -> Cart:
        # Drop identity-map state so the membership is read back from storage.
        session.expire_all()
        return self._get_cart(session, cart_id)

    # ---- public operations ----

    def get_cart(self, session: Session, cart_id: int) -> Cart:
        return self._get_cart(session, cart_id)

    def create_cart(self, session: Session) -> Cart:
        now = datetime.now(timezone.utc)
        cart = self.cart_repo.create(session, Cart(created_at=now, updated_at=now))
        logger.info("Created cart %s", cart.id)
        return cart

    def add_product(
        self,
        session: Session,
        cart_id: int,
        payload: CartProductAdd,
    ) -> Cart:
        """
        Add a product to a cart (idempotent).

        A concurrent request may insert the same membership row between
        our read and our flush; the composite key rejects it and the
        product is then already a member, which is the outcome we want.
        Any other integrity failure (e.g. the product was deleted in the
        meantime) leaves the product outside the cart and is re-raised.
        """
        try:
            cart = self._get_cart(session, cart_id, for_update=True)
            product = self._get_product(session, payload.product_id)

            if self.cart_repo.contains(cart, product):
                logger.debug("Product %s already in cart %s", product.id, cart.id)
            else:
                self.cart_repo.add_product(session, cart, product)
                cart.updated_at = datetime.now(timezone.utc)
                logger.info("Added product %s to cart %s", product.id, cart.id)

            session.commit()
        except IntegrityError:
            session.rollback()
            cart = self._reload(session, cart_id)
            if not any(p.id == payload.product_id for p in cart.products):
                raise
            logger.info(
                "Product %s was added to cart %s concurrently",
                payload.product_id,
                cart_id,
            )
        except HTTPException:
            session.rollback()
            raise

        return self._reload(session, cart_id)

    def remove_product(
        self,
        session: Session,
        cart_id: int,
        product_id: int,
    ) -> Cart:
        """
        Remove a product from a cart.

        Cart and product must both exist (404 otherwise); a product that
        is not in the cart leaves the membership unchanged.
        """
        try:
            cart = self._get_cart(session, cart_id, for_update=True)
            product = self._get_product(session, product_id)

            if self.cart_repo.contains(cart, product):
                self.cart_repo.remove_product(session, cart, product)
                cart.updated_at = datetime.now(timezone.utc)
                logger.info("Removed product %s from cart %s", product.id, cart.id)

            session.commit()
        except HTTPException:
            session.rollback()
            raise

        return self._reload(session, cart_id)
