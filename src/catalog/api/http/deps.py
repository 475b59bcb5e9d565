"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import ImageService, ProductService, ReleaseService
from src.catalog.entities.release import Release


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session, closed when the request ends."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(db)


def get_release_service(db: Session = Depends(get_db_session)) -> ReleaseService:
    return ReleaseService(db)


def get_image_service(db: Session = Depends(get_db_session)) -> ImageService:
    return ImageService(db)


def get_release_key(
    product_name: str,
    release_name: str,
    products: ProductService = Depends(get_product_service),
) -> Release:
    """Resolve ``/products/{product_name}/releases/{release_name}`` to a release key."""
    product = products.get(product_name)
    return Release(product_id=product.id, name=release_name)
