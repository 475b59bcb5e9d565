"""Catalog entity services and the release/image association engine."""

from .association import ReleaseImageAssociation
from .image_service import ImageService
from .product_service import ProductService
from .release_service import ReleaseService

__all__ = [
    "ImageService",
    "ProductService",
    "ReleaseImageAssociation",
    "ReleaseService",
]
