# shopapi/services/product_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from shopapi.models.product import Product
from shopapi.repositories.category_repo import CategoryRepository
from shopapi.repositories.product_repo import ProductRepository
from shopapi.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - make sure category_id points at an existing category
      - overlay updates (unset fields keep their value)
      - stamp created_at / updated_at
      - report missing products as 404
    """

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    # ----- Helpers -----

    def _ensure_category(self, session: Session, category_id: int) -> None:
        if self.category_repo.get_by_id(session, category_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )

    # ----- Products -----

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list(session)

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(
        self,
        session: Session,
        payload: ProductCreate,
    ) -> Product:
        self._ensure_category(session, payload.category_id)

        now = datetime.now(timezone.utc)
        product = Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            category_id=payload.category_id,
            created_at=now,
            updated_at=now,
        )
        product = self.repo.create(session, product)
        logger.info("Created product %s in category %s", product.id, product.category_id)
        return product

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate,
    ) -> Product:
        """
        Overlay update of a product.

        - 404 (and no write) when the product does not exist.
        - A changed category_id must point at an existing category.
        """
        product = self.get_product(session, product_id)

        if payload.category_id is not None and payload.category_id != product.category_id:
            self._ensure_category(session, payload.category_id)
            product.category_id = payload.category_id

        if payload.name is not None:
            product.name = payload.name

        if payload.description is not None:
            product.description = payload.description

        if payload.price is not None:
            product.price = payload.price

        product.updated_at = datetime.now(timezone.utc)
        product = self.repo.update(session, product)
        logger.info("Updated product %s", product.id)
        return product

    def delete_product(
        self,
        session: Session,
        product_id: int,
    ) -> None:
        """
        Hard delete. Missing ids are not an error.
        """
        if self.repo.delete_by_id(session, product_id):
            logger.info("Deleted product %s", product_id)
