"""Release/image mapping data access."""

from functools import partial

from sqlalchemy import delete, insert
from sqlmodel import Session, select

from src.catalog.entities._rows import scan_all, scan_into
from src.catalog.entities.release_image.entity import ReleaseImageMapping
from src.catalog.entities.release_image.table import ReleaseImageMappingTable

MAPPING_FIELDS = ("release_id", "image_id")
MAPPING_COLUMNS = (
    ReleaseImageMappingTable.release_id,
    ReleaseImageMappingTable.image_id,
)

_mappings = ReleaseImageMappingTable.__table__
scan_mapping = partial(scan_into, ReleaseImageMapping, MAPPING_FIELDS)


class ReleaseImageMappingRepository:
    """Data-access layer for the release/image join table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, release_id: int, image_id: int) -> None:
        self._session.exec(
            insert(_mappings).values(release_id=release_id, image_id=image_id)
        )

    def list_for_image(self, image_id: int) -> list[ReleaseImageMapping]:
        statement = (
            select(*MAPPING_COLUMNS)
            .where(ReleaseImageMappingTable.image_id == image_id)
            .order_by(ReleaseImageMappingTable.release_id)
        )
        return scan_all(self._session.exec(statement), scan_mapping)

    def list_for_release(self, release_id: int) -> list[ReleaseImageMapping]:
        statement = (
            select(*MAPPING_COLUMNS)
            .where(ReleaseImageMappingTable.release_id == release_id)
            .order_by(ReleaseImageMappingTable.image_id)
        )
        return scan_all(self._session.exec(statement), scan_mapping)

    def delete_for_release(self, release_id: int) -> int:
        statement = delete(_mappings).where(_mappings.c.release_id == release_id)
        return self._session.exec(statement).rowcount

    def delete_for_image(self, image_id: int) -> int:
        statement = delete(_mappings).where(_mappings.c.image_id == image_id)
        return self._session.exec(statement).rowcount
