# shopapi/services/category_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from shopapi.models.category import Category
from shopapi.repositories.category_repo import CategoryRepository
from shopapi.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Business logic for Category.

    Responsibilities:
      - stamp created_at / updated_at
      - report missing categories as 404
    """

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list(session)

    def get_category(self, session: Session, category_id: int) -> Category:
        """Return a category with its products, or 404."""
        category = self.repo.get_with_products(session, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        return category

    def create_category(
        self,
        session: Session,
        payload: CategoryCreate,
    ) -> Category:
        now = datetime.now(timezone.utc)
        category = Category(name=payload.name, created_at=now, updated_at=now)
        category = self.repo.create(session, category)
        logger.info("Created category %s (%r)", category.id, category.name)
        return category

    def update_category(
        self,
        session: Session,
        category_id: int,
        payload: CategoryUpdate,
    ) -> Category:
        """
        Overlay update: only fields present in the payload are applied.
        """
        category = self.get_category(session, category_id)

        if payload.name is not None:
            category.name = payload.name

        category.updated_at = datetime.now(timezone.utc)
        category = self.repo.update(session, category)
        logger.info("Updated category %s", category.id)
        return category
