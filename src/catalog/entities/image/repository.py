"""Image data access."""

from functools import partial
from typing import Any

from sqlalchemy import delete, insert, update
from sqlmodel import Session, select

from src.catalog.entities._base import utcnow
from src.catalog.entities._rows import scan_all, scan_into, scan_one
from src.catalog.entities.image.entity import Image
from src.catalog.entities.image.table import ImageTable

IMAGE_FIELDS = (
    "id",
    "image_type",
    "software_name",
    "image_name",
    "created_at",
    "updated_at",
)
IMAGE_COLUMNS = (
    ImageTable.id,
    ImageTable.image_type,
    ImageTable.software_name,
    ImageTable.image_name,
    ImageTable.created_at,
    ImageTable.updated_at,
)
MUTABLE_IMAGE_FIELDS = ("image_type", "software_name", "image_name")

_images = ImageTable.__table__
scan_image = partial(scan_into, Image, IMAGE_FIELDS)


class ImageRepository:
    """Data-access layer for images."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert(self, image_type: str, software_name: str, image_name: str) -> int:
        """Insert an image row and return its server-assigned id."""
        statement = insert(_images).values(
            image_type=image_type, software_name=software_name, image_name=image_name
        )
        result = self._session.exec(statement)
        return result.inserted_primary_key[0]

    def get_by_id(self, image_id: int) -> Image | None:
        statement = select(*IMAGE_COLUMNS).where(ImageTable.id == image_id)
        return scan_one(self._session.exec(statement), scan_image)

    def list_all(self) -> list[Image]:
        statement = select(*IMAGE_COLUMNS).order_by(ImageTable.id)
        return scan_all(self._session.exec(statement), scan_image)

    def update_fields(self, image_id: int, **fields: Any) -> int:
        """Update only the supplied mutable columns of one image."""
        values = {
            name: value
            for name, value in fields.items()
            if name in MUTABLE_IMAGE_FIELDS and value is not None
        }
        if not values:
            # Only the associations changed; still mark the row as updated
            values = {"updated_at": utcnow()}
        statement = update(_images).where(_images.c.id == image_id).values(**values)
        return self._session.exec(statement).rowcount

    def delete(self, image_id: int) -> int:
        statement = delete(_images).where(_images.c.id == image_id)
        return self._session.exec(statement).rowcount
