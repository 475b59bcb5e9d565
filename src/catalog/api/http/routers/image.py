"""Image API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_image_service
from src.catalog.core.services import ImageService
from src.catalog.entities.image import Image
from src.catalog.entities.release import Release

router = APIRouter(prefix="/images", tags=["images"])


@router.get("", response_model=list[Image])
def list_images(images: ImageService = Depends(get_image_service)) -> list[Image]:
    return images.list_all()


@router.post("", response_model=Image, status_code=status.HTTP_201_CREATED)
def create_image(
    image: Image,
    images: ImageService = Depends(get_image_service),
) -> Image:
    """Create an image, linking it to the releases listed in ``release_ids``."""
    return images.create(image)


@router.get("/{image_id}", response_model=Image)
def get_image(
    image_id: int,
    images: ImageService = Depends(get_image_service),
) -> Image:
    """Get an image together with the releases that reference it."""
    return images.get(image_id)


@router.get("/{image_id}/releases", response_model=list[Release])
def list_image_releases(
    image_id: int,
    images: ImageService = Depends(get_image_service),
) -> list[Release]:
    return images.list_releases(image_id)


@router.put("/{image_id}", response_model=Image)
def update_image(
    image_id: int,
    image_update: Image,
    images: ImageService = Depends(get_image_service),
) -> Image:
    """Update the supplied image fields; ``release_ids`` replaces all links."""
    return images.update(image_update.model_copy(update={"id": image_id}))


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_image(
    image_id: int,
    images: ImageService = Depends(get_image_service),
) -> Response:
    images.delete(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
