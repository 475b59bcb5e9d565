"""Release API routers.

Releases are nested under their product: ``/products/{product_name}/releases``.
``/releases`` lists every release in the catalog.
"""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import (
    get_product_service,
    get_release_key,
    get_release_service,
)
from src.catalog.core.services import ProductService, ReleaseService
from src.catalog.entities.release import Release

router = APIRouter(prefix="/products/{product_name}/releases", tags=["releases"])
index_router = APIRouter(prefix="/releases", tags=["releases"])


@index_router.get("", response_model=list[Release])
def list_all_releases(
    releases: ReleaseService = Depends(get_release_service),
) -> list[Release]:
    return releases.list_all()


@router.get("", response_model=list[Release])
def list_product_releases(
    product_name: str,
    releases: ReleaseService = Depends(get_release_service),
) -> list[Release]:
    """List a product's releases; images are not attached."""
    return releases.list_for_product(product_name)


@router.post("", response_model=Release, status_code=status.HTTP_201_CREATED)
def create_release(
    product_name: str,
    release: Release,
    products: ProductService = Depends(get_product_service),
    releases: ReleaseService = Depends(get_release_service),
) -> Release:
    """Create a release for the product named in the path."""
    product = products.get(product_name)
    return releases.create(release.model_copy(update={"product_id": product.id}))


@router.get("/{release_name}", response_model=Release)
def get_release(
    key: Release = Depends(get_release_key),
    releases: ReleaseService = Depends(get_release_service),
) -> Release:
    """Get a release together with its images."""
    return releases.get(key)


@router.put("/{release_name}", response_model=Release)
def update_release(
    release_update: Release,
    key: Release = Depends(get_release_key),
    releases: ReleaseService = Depends(get_release_service),
) -> Release:
    return releases.update(
        key.model_copy(update={"tarball_link": release_update.tarball_link})
    )


@router.delete("/{release_name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_release(
    key: Release = Depends(get_release_key),
    releases: ReleaseService = Depends(get_release_service),
) -> Response:
    releases.delete(key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
