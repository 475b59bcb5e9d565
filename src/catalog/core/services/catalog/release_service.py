"""Release CRUD service."""

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import NotFoundError
from src.catalog.core.services.catalog.association import ReleaseImageAssociation
from src.catalog.core.services.catalog.base import CatalogService
from src.catalog.core.validation import Operation, validate_release
from src.catalog.entities.product import ProductRepository
from src.catalog.entities.release import Release, ReleaseRepository
from src.catalog.entities.release_image import ReleaseImageMappingRepository
from src.catalog.runtime.context import get_config


class ReleaseService(CatalogService):
    """Create, read, update and delete releases.

    Releases are addressed by ``(product_id, name)``. A single-release lookup
    attaches the release's images unless ``eager_images`` is turned off.
    """

    def __init__(self, session: Session, eager_images: bool | None = None) -> None:
        super().__init__(session)
        self._products = ProductRepository(session)
        self._releases = ReleaseRepository(session)
        self._mappings = ReleaseImageMappingRepository(session)
        self._association = ReleaseImageAssociation(session)
        if eager_images is None:
            eager_images = get_config().catalog.eager_release_images
        self._eager_images = eager_images

    def _get_existing(self, release: Release) -> Release:
        retrieved = self._releases.get_by_key(release.name, release.product_id)
        if retrieved is None:
            raise NotFoundError(
                f'Release "{release.name}" not found for product id {release.product_id}'
            )
        return retrieved

    def create(self, release: Release) -> Release:
        self._require(validate_release(release, Operation.CREATE))

        with self._unit_of_work("Error creating new release", commit=True):
            if self._products.get_by_id(release.product_id) is None:
                raise NotFoundError(f"Product with id {release.product_id} not found")
            self._releases.insert(release.product_id, release.name, release.tarball_link)
            created = self._get_existing(release)

        logger.bind(product_id=created.product_id, release=created.name).info(
            "Release has been successfully created"
        )
        return created

    def get(self, release: Release) -> Release:
        with self._unit_of_work("Error finding release"):
            return self._association.get_release(release, with_images=self._eager_images)

    def list_all(self) -> list[Release]:
        with self._unit_of_work("Error listing releases"):
            return self._releases.list_all()

    def list_for_product(self, product_name: str) -> list[Release]:
        with self._unit_of_work("Error listing releases for product"):
            return self._association.get_all_releases_for_product(product_name)

    def update(self, release: Release) -> Release:
        """Apply the supplied mutable fields; absent fields keep stored values."""
        self._require(validate_release(release, Operation.UPDATE))

        with self._unit_of_work("Error updating release", commit=True):
            touched = self._releases.update_tarball_link(
                release.name, release.product_id, release.tarball_link
            )
            if touched == 0:
                raise NotFoundError(
                    f'Release "{release.name}" not found for product id {release.product_id}'
                )
            updated = self._get_existing(release)

        logger.bind(product_id=updated.product_id, release=updated.name).info(
            "Release has been successfully updated"
        )
        return updated

    def delete(self, release: Release) -> None:
        """Delete a release and every mapping row that references it."""
        self._require(validate_release(release, Operation.DELETE))

        with self._unit_of_work("Error deleting release", commit=True):
            existing = self._get_existing(release)
            self._mappings.delete_for_release(existing.id)
            self._releases.delete(existing.id)

        logger.bind(product_id=release.product_id, release=release.name).info(
            "Release has been successfully deleted"
        )
