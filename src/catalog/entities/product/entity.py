"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity


class Product(Entity):
    """Top-level catalog entry, identified by its unique name."""

    name: str | None = Field(default=None, description="Unique product name")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name))
