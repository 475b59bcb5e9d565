"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model handed between layers and serialized by the API
- table.py: Database persistence model
- repository.py: Data access layer (the relational store adapter)
"""

from .image import Image, ImageRepository, ImageTable
from .product import Product, ProductRepository, ProductTable
from .release import Release, ReleaseRepository, ReleaseTable
from .release_image import (
    ReleaseImageMapping,
    ReleaseImageMappingRepository,
    ReleaseImageMappingTable,
)

__all__ = [
    "Image",
    "ImageRepository",
    "ImageTable",
    "Product",
    "ProductRepository",
    "ProductTable",
    "Release",
    "ReleaseRepository",
    "ReleaseTable",
    "ReleaseImageMapping",
    "ReleaseImageMappingRepository",
    "ReleaseImageMappingTable",
]
