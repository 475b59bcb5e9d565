"""Core services exports."""

from .catalog import ImageService, ProductService, ReleaseImageAssociation, ReleaseService
from .database import DbManageService, DbSessionService

__all__ = [
    # Catalog services
    "ImageService",
    "ProductService",
    "ReleaseImageAssociation",
    "ReleaseService",
    # Database services
    "DbManageService",
    "DbSessionService",
]
