"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.product_app.api.http.deps import get_product_service
from src.product_app.core.services import ProductService
from src.product_app.entities.product import Product, ProductPayload

router = APIRouter(prefix="/products", tags=["products"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Product not found"}}


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.get_all_products()


@router.get("/{product_id}", response_model=Product, responses=_NOT_FOUND)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    return service.get_product_by_id(product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    return service.save_product(payload.to_product())


@router.put("/{product_id}", response_model=Product, responses=_NOT_FOUND)
def update_product(
    product_id: int,
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update the name and price of an existing product."""
    existing = service.get_product_by_id(product_id)
    return service.save_product(existing.merge(payload))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product. Deleting an unknown id succeeds."""
    service.delete_product(product_id)
