"""Entity: Release."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity
from src.catalog.entities.image.entity import Image


class Release(Entity):
    """A named version of a product, optionally carrying a tarball link.

    ``tarball_link`` is presence-aware: ``None`` means "not provided" and is
    never conflated with the empty string. ``images`` stays ``None`` unless a
    single-release lookup attached them.
    """

    product_id: int | None = Field(default=None, description="Owning product id")
    name: str | None = Field(default=None, description="Release name, unique per product")
    tarball_link: str | None = Field(default=None, description="Download URL")
    images: list[Image] | None = Field(default=None)

    def __eq__(self, other: Any) -> bool:
        """Compare releases by business attributes, ignoring timestamps."""
        if not isinstance(other, Release):
            return False

        return (
            self.id == other.id
            and self.product_id == other.product_id
            and self.name == other.name
            and self.tarball_link == other.tarball_link
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.product_id, self.name, self.tarball_link))


# Image.releases refers back to Release
Image.model_rebuild(_types_namespace={"Release": Release})
Release.model_rebuild()
