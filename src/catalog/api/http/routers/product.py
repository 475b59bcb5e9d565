"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ProductService
from src.catalog.entities.product import Product

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[Product])
def list_products(products: ProductService = Depends(get_product_service)) -> list[Product]:
    """List all products."""
    return products.list_all()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    products: ProductService = Depends(get_product_service),
) -> Product:
    """Create a product and respond with the stored row."""
    return products.create(product)


@router.get("/{product_name}", response_model=Product)
def get_product(
    product_name: str,
    products: ProductService = Depends(get_product_service),
) -> Product:
    return products.get(product_name)


@router.put("/{product_name}", response_model=Product)
def update_product(
    product_name: str,
    product_update: Product,
    products: ProductService = Depends(get_product_service),
) -> Product:
    """Rename a product."""
    return products.update(product_name, product_update)


@router.delete("/{product_name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_name: str,
    products: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product, its releases and their image links."""
    products.delete(product_name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
