"""Entity package: Image."""

from .entity import Image
from .repository import ImageRepository
from .table import ImageTable

__all__ = ["Image", "ImageRepository", "ImageTable"]
