"""Entity package: the release/image join record."""

from .entity import ReleaseImageMapping
from .repository import ReleaseImageMappingRepository
from .table import ReleaseImageMappingTable

__all__ = [
    "ReleaseImageMapping",
    "ReleaseImageMappingRepository",
    "ReleaseImageMappingTable",
]
