# shopapi/repositories/category_repo.py
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from shopapi.models.category import Category


class CategoryRepository:
    """
    Data access layer for Category.
    """

    def get_by_id(self, session: Session, category_id: int) -> Category | None:
        """Return a Category by primary key, or None if not found."""
        return session.get(Category, category_id)

    def get_with_products(
        self, session: Session, category_id: int
    ) -> Category | None:
        """Return a Category with its products eagerly loaded."""
        stmt = (
            select(Category)
            .options(selectinload(Category.products))
            .where(Category.id == category_id)
        )
        return session.exec(stmt).first()

    def list(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.id)
        return session.exec(stmt).all()

    def create(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    def update(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category
