# shopapi/repositories/product_repo.py
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from shopapi.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - Reads eagerly load the product's category.
    """

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        stmt = (
            select(Product)
            .options(selectinload(Product.category))
            .where(Product.id == product_id)
        )
        return session.exec(stmt).first()

    def list(self, session: Session) -> list[Product]:
        stmt = (
            select(Product)
            .options(selectinload(Product.category))
            .order_by(Product.id)
        )
        return session.exec(stmt).all()

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete_by_id(self, session: Session, product_id: int) -> bool:
        """
        Delete a product and its cart memberships.

        Returns False when no row matched; that is not an error.
        """
        product = session.get(Product, product_id)
        if product is None:
            return False
        session.delete(product)
        session.commit()
        return True
