"""Release database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.catalog.entities._base import EntityTable


class ReleaseTable(EntityTable, table=True):
    """Database persistence model for releases.

    A release name is unique within its product.
    """

    __tablename__ = "releases"
    __table_args__ = (
        UniqueConstraint("product_id", "name", name="uq_releases_product_name"),
    )

    product_id: int = Field(foreign_key="products.id", nullable=False, index=True)
    name: str = Field(nullable=False)
    tarball_link: str | None = Field(default=None, nullable=True)
