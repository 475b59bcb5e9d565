"""Image CRUD service."""

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import NotFoundError
from src.catalog.core.services.catalog.association import ReleaseImageAssociation
from src.catalog.core.services.catalog.base import CatalogService
from src.catalog.core.validation import Operation, validate_image
from src.catalog.entities.image import Image, ImageRepository
from src.catalog.entities.release import Release, ReleaseRepository
from src.catalog.entities.release_image import ReleaseImageMappingRepository


class ImageService(CatalogService):
    """Create, read, update and delete images and their release links."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._images = ImageRepository(session)
        self._releases = ReleaseRepository(session)
        self._mappings = ReleaseImageMappingRepository(session)
        self._association = ReleaseImageAssociation(session)

    def _get_existing(self, image_id: int) -> Image:
        image = self._images.get_by_id(image_id)
        if image is None:
            raise NotFoundError(f"Image with id {image_id} not found")
        return image

    def _with_releases(self, image: Image) -> Image:
        return image.model_copy(
            update={"releases": self._association.get_all_releases_for_image(image.id)}
        )

    def _link(self, image_id: int, release_ids: list[int]) -> None:
        """Replace the image's release links with ``release_ids``."""
        # dict.fromkeys keeps the first occurrence order and drops duplicates
        wanted = list(dict.fromkeys(release_ids))
        for release_id in wanted:
            if self._releases.get_by_id(release_id) is None:
                raise NotFoundError(f"Release with id {release_id} not found")
        self._mappings.delete_for_image(image_id)
        for release_id in wanted:
            self._mappings.add(release_id, image_id)

    def create(self, image: Image) -> Image:
        self._require(validate_image(image, Operation.CREATE))

        with self._unit_of_work("Error creating new image", commit=True):
            image_id = self._images.insert(
                image.image_type, image.software_name, image.image_name
            )
            if image.release_ids:
                self._link(image_id, image.release_ids)
            created = self._with_releases(self._get_existing(image_id))

        logger.bind(image_id=created.id, image=created.image_name).info(
            "Image has been successfully created"
        )
        return created

    def get(self, image_id: int | None) -> Image:
        self._require(validate_image(Image(id=image_id), Operation.LOOKUP))

        with self._unit_of_work("Error finding image"):
            return self._with_releases(self._get_existing(image_id))

    def list_all(self) -> list[Image]:
        with self._unit_of_work("Error listing images"):
            return self._images.list_all()

    def list_releases(self, image_id: int) -> list[Release]:
        """Releases referencing an image, each without its own image list."""
        with self._unit_of_work("Error listing releases for image"):
            self._get_existing(image_id)
            return self._association.get_all_releases_for_image(image_id)

    def update(self, image: Image) -> Image:
        self._require(validate_image(image, Operation.UPDATE))

        with self._unit_of_work("Error updating image", commit=True):
            touched = self._images.update_fields(
                image.id,
                image_type=image.image_type,
                software_name=image.software_name,
                image_name=image.image_name,
            )
            if touched == 0:
                raise NotFoundError(f"Image with id {image.id} not found")
            if image.release_ids is not None:
                self._link(image.id, image.release_ids)
            updated = self._with_releases(self._get_existing(image.id))

        logger.bind(image_id=updated.id).info("Image has been successfully updated")
        return updated

    def delete(self, image_id: int | None) -> None:
        """Delete an image and every mapping row that references it."""
        self._require(validate_image(Image(id=image_id), Operation.DELETE))

        with self._unit_of_work("Error deleting image", commit=True):
            self._mappings.delete_for_image(image_id)
            if self._images.delete(image_id) == 0:
                raise NotFoundError(f"Image with id {image_id} not found")

        logger.bind(image_id=image_id).info("Image has been successfully deleted")
