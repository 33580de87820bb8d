# shopapi/routers/products.py
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from shopapi.database import get_session
from shopapi.repositories.category_repo import CategoryRepository
from shopapi.repositories.product_repo import ProductRepository
from shopapi.schemas.product import (
    ProductCreate,
    ProductReadWithCategory,
    ProductUpdate,
)
from shopapi.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
category_repo = CategoryRepository()
service = ProductService(repo, category_repo)


@router.get("", response_model=list[ProductReadWithCategory])
def list_products(session: Session = Depends(get_session)):
    """
    List every product with its category.

    No pagination, no filtering.
    """
    return service.list_products(session)


@router.get("/{product_id}", response_model=ProductReadWithCategory)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id, with its category.
    """
    return service.get_product(session, product_id)


@router.post(
    "",
    response_model=ProductReadWithCategory,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product in an existing category.
    """
    return service.create_product(session, payload)


@router.put("/{product_id}", response_model=ProductReadWithCategory)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Overlay the given fields onto an existing product.
    """
    return service.update_product(session, product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a product. Succeeds whether or not the id existed.
    """
    service.delete_product(session, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
