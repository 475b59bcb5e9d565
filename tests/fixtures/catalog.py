"""Service fixtures and seeded catalog rows."""

from __future__ import annotations

import pytest
from sqlmodel import Session

from src.catalog.core.services import (
    ImageService,
    ProductService,
    ReleaseImageAssociation,
    ReleaseService,
)
from src.catalog.entities.image import Image
from src.catalog.entities.product import Product
from src.catalog.entities.release import Release

__all__ = [
    "product_service",
    "release_service",
    "image_service",
    "association",
    "acme",
    "acme_v1",
    "docker_image",
]


@pytest.fixture
def product_service(session: Session) -> ProductService:
    return ProductService(session)


@pytest.fixture
def release_service(session: Session) -> ReleaseService:
    return ReleaseService(session, eager_images=True)


@pytest.fixture
def image_service(session: Session) -> ImageService:
    return ImageService(session)


@pytest.fixture
def association(session: Session) -> ReleaseImageAssociation:
    return ReleaseImageAssociation(session)


@pytest.fixture
def acme(product_service: ProductService) -> Product:
    """A stored product named ``acme``."""
    return product_service.create(Product(name="acme"))


@pytest.fixture
def acme_v1(acme: Product, release_service: ReleaseService) -> Release:
    """Release ``v1`` of ``acme``, stored without a tarball link."""
    return release_service.create(Release(product_id=acme.id, name="v1"))


@pytest.fixture
def docker_image(image_service: ImageService, acme_v1: Release) -> Image:
    """A stored image linked to ``acme`` v1."""
    return image_service.create(
        Image(
            image_type="docker",
            software_name="acme-server",
            image_name="acme/server:1.0",
            release_ids=[acme_v1.id],
        )
    )
