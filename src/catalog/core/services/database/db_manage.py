"""Schema management for the catalog tables."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        # Importing the table modules registers them with SQLModel.metadata
        from src.catalog.entities.image import ImageTable  # noqa: F401
        from src.catalog.entities.product import ProductTable  # noqa: F401
        from src.catalog.entities.release import ReleaseTable  # noqa: F401
        from src.catalog.entities.release_image import ReleaseImageMappingTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
