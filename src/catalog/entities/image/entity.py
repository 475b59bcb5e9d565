"""Entity: Image."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from src.catalog.entities._base import Entity

if TYPE_CHECKING:
    from src.catalog.entities.release.entity import Release


class Image(Entity):
    """A build artifact linked to zero or more releases.

    ``release_ids`` is write-only input: when supplied on create or update it
    is the full set of releases the image should be linked to. ``releases``
    is populated only by a single-image lookup.
    """

    image_type: str | None = Field(default=None, description="Artifact kind, e.g. container")
    software_name: str | None = Field(default=None, description="Packaged software")
    image_name: str | None = Field(default=None, description="Artifact name")
    release_ids: list[int] | None = Field(default=None, exclude=True)
    releases: list[Release] | None = Field(default=None)

    def __eq__(self, other: Any) -> bool:
        """Compare images by business attributes, ignoring timestamps."""
        if not isinstance(other, Image):
            return False

        return (
            self.id == other.id
            and self.image_type == other.image_type
            and self.software_name == other.software_name
            and self.image_name == other.image_name
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.image_type, self.software_name, self.image_name))
