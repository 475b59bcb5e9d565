"""Release data access."""

from functools import partial

from sqlalchemy import delete, insert, update
from sqlmodel import Session, select

from src.catalog.entities._rows import scan_all, scan_into, scan_one
from src.catalog.entities.release.entity import Release
from src.catalog.entities.release.table import ReleaseTable

# Scan order is part of the persisted-state contract
RELEASE_FIELDS = ("id", "product_id", "name", "tarball_link", "created_at", "updated_at")
RELEASE_COLUMNS = (
    ReleaseTable.id,
    ReleaseTable.product_id,
    ReleaseTable.name,
    ReleaseTable.tarball_link,
    ReleaseTable.created_at,
    ReleaseTable.updated_at,
)

_releases = ReleaseTable.__table__
scan_release = partial(scan_into, Release, RELEASE_FIELDS)


class ReleaseRepository:
    """Data-access layer for releases."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert(self, product_id: int, name: str, tarball_link: str | None = None) -> None:
        """Insert a release row.

        When ``tarball_link`` is absent the column is left out of the INSERT
        entirely, so the store default applies.
        """
        values = {"product_id": product_id, "name": name}
        if tarball_link is not None:
            values["tarball_link"] = tarball_link
        self._session.exec(insert(_releases).values(**values))

    def get_by_key(self, name: str, product_id: int) -> Release | None:
        statement = select(*RELEASE_COLUMNS).where(
            ReleaseTable.name == name, ReleaseTable.product_id == product_id
        )
        return scan_one(self._session.exec(statement), scan_release)

    def get_by_id(self, release_id: int) -> Release | None:
        statement = select(*RELEASE_COLUMNS).where(ReleaseTable.id == release_id)
        return scan_one(self._session.exec(statement), scan_release)

    def list_all(self) -> list[Release]:
        statement = select(*RELEASE_COLUMNS).order_by(ReleaseTable.id)
        return scan_all(self._session.exec(statement), scan_release)

    def list_for_product(self, product_id: int) -> list[Release]:
        statement = (
            select(*RELEASE_COLUMNS)
            .where(ReleaseTable.product_id == product_id)
            .order_by(ReleaseTable.id)
        )
        return scan_all(self._session.exec(statement), scan_release)

    def list_ids_for_product(self, product_id: int) -> list[int]:
        statement = select(ReleaseTable.id).where(ReleaseTable.product_id == product_id)
        return list(self._session.exec(statement).all())

    def update_tarball_link(self, name: str, product_id: int, tarball_link: str) -> int:
        statement = (
            update(_releases)
            .where(_releases.c.name == name, _releases.c.product_id == product_id)
            .values(tarball_link=tarball_link)
        )
        return self._session.exec(statement).rowcount

    def delete(self, release_id: int) -> int:
        statement = delete(_releases).where(_releases.c.id == release_id)
        return self._session.exec(statement).rowcount
