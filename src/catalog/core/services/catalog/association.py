"""Release/image association engine.

Both directions of the many-to-many relationship are resolved with
single-key queries: first the mapping rows, then one entity lookup per row.
No join query is issued, so a failure can always be attributed to the row
that caused it.

Expansion is bounded. Resolving an image's releases uses
:meth:`ReleaseImageAssociation.get_release_without_images`, and resolving a
release's images uses :meth:`ReleaseImageAssociation.get_image_without_releases`,
so neither direction ever recurses back into the other.
"""

from sqlmodel import Session

from src.catalog.core.errors import NotFoundError, StorageError, ValidationFailure
from src.catalog.core.validation import Operation, validate_release
from src.catalog.entities.image import Image, ImageRepository
from src.catalog.entities.product import ProductRepository
from src.catalog.entities.release import Release, ReleaseRepository
from src.catalog.entities.release_image import ReleaseImageMappingRepository


class ReleaseImageAssociation:
    """Resolves releases and images through the mapping table."""

    def __init__(self, session: Session) -> None:
        self._products = ProductRepository(session)
        self._releases = ReleaseRepository(session)
        self._images = ImageRepository(session)
        self._mappings = ReleaseImageMappingRepository(session)

    def get_all_releases_for_product(self, product_name: str) -> list[Release]:
        """List a product's releases without attaching their images."""
        product = self._products.get_by_name(product_name)
        if product is None:
            raise NotFoundError(f'Product "{product_name}" not found')
        return self._releases.list_for_product(product.id)

    def get_release(self, release: Release, *, with_images: bool = True) -> Release:
        """Look up a release by ``(name, product_id)`` and attach its images."""
        error = validate_release(release, Operation.LOOKUP)
        if error is not None:
            raise ValidationFailure(error)

        retrieved = self._releases.get_by_key(release.name, release.product_id)
        if retrieved is None:
            raise NotFoundError(
                f'Error finding release: no release "{release.name}" '
                f"for product id {release.product_id}"
            )
        if with_images:
            retrieved.images = self.get_all_images_for_release(retrieved.id)
        return retrieved

    def get_release_without_images(self, release_id: int) -> Release:
        retrieved = self._releases.get_by_id(release_id)
        if retrieved is None:
            raise StorageError(f"Error fetching release: no release with id {release_id}")
        return retrieved

    def get_image_without_releases(self, image_id: int) -> Image:
        retrieved = self._images.get_by_id(image_id)
        if retrieved is None:
            raise StorageError(f"Error fetching image: no image with id {image_id}")
        return retrieved

    def get_all_releases_for_image(self, image_id: int) -> list[Release]:
        """Resolve every release that references ``image_id``.

        The first unresolvable mapping row aborts the whole call; the
        releases gathered so far are discarded, never returned.
        """
        fetched_releases: list[Release] = []
        for mapping in self._mappings.list_for_image(image_id):
            fetched_releases.append(self.get_release_without_images(mapping.release_id))
        return fetched_releases

    def get_all_images_for_release(self, release_id: int) -> list[Image]:
        """Resolve every image linked to ``release_id``; same failure policy."""
        fetched_images: list[Image] = []
        for mapping in self._mappings.list_for_release(release_id):
            fetched_images.append(self.get_image_without_releases(mapping.image_id))
        return fetched_images
