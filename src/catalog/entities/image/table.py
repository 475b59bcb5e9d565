"""Image database table model."""

from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class ImageTable(EntityTable, table=True):
    """Database persistence model for images."""

    __tablename__ = "images"

    image_type: str = Field(nullable=False)
    software_name: str = Field(nullable=False)
    image_name: str = Field(nullable=False)
