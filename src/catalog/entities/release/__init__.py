"""Entity package: Release."""

from .entity import Release
from .repository import ReleaseRepository
from .table import ReleaseTable

__all__ = ["Release", "ReleaseRepository", "ReleaseTable"]
