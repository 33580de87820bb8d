# shopapi/repositories/cart_repo.py
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from shopapi.models.cart import Cart
from shopapi.models.product import Product


class CartRepository:
    """
    Data access layer for carts and their product membership.

    NOTE:
      - Membership changes only flush. Adding or removing a product is
        one unit of work (load cart, load product, mutate) and the
        service is responsible for calling session.commit().
    """

    def get_by_id(
        self,
        session: Session,
        cart_id: int,
        for_update: bool = False,
    ) -> Cart | None:
        """
        Load a cart with its products materialized.

        for_update=True locks the cart row until the transaction ends on
        backends that support SELECT ... FOR UPDATE (ignored on SQLite).
        """
        stmt = (
            select(Cart)
            .options(selectinload(Cart.products))
            .where(Cart.id == cart_id)
        )
        if for_update:
            stmt = stmt.with_for_update()
        return session.exec(stmt).first()

    def create(self, session: Session, cart: Cart) -> Cart:
        session.add(cart)
        session.commit()
        session.refresh(cart)
        return cart

    @staticmethod
    def contains(cart: Cart, product: Product) -> bool:
        return any(p.id == product.id for p in cart.products)

    def add_product(self, session: Session, cart: Cart, product: Product) -> None:
        cart.products.append(product)
        session.add(cart)
        session.flush()

    def remove_product(
        self, session: Session, cart: Cart, product: Product
    ) -> None:
        cart.products = [p for p in cart.products if p.id != product.id]
        session.add(cart)
        session.flush()
