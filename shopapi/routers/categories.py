# shopapi/routers/categories.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from shopapi.database import get_session
from shopapi.repositories.category_repo import CategoryRepository
from shopapi.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from shopapi.schemas.product import CategoryReadWithProducts
from shopapi.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

repo = CategoryRepository()
service = CategoryService(repo)


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    """List all categories (without their products)."""
    return service.list_categories(session)


@router.get("/{category_id}", response_model=CategoryReadWithProducts)
def get_category(
    category_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a category with every product that references it.
    """
    return service.get_category(session, category_id)


@router.post(
    "",
    response_model=CategoryReadWithProducts,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    return service.create_category(session, payload)


@router.put("/{category_id}", response_model=CategoryReadWithProducts)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    session: Session = Depends(get_session),
):
    """
    Overlay the given fields onto an existing category.
    """
    return service.update_category(session, category_id, payload)
