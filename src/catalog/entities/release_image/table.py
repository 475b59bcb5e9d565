"""Release/image join table model."""

from sqlmodel import Field, SQLModel


class ReleaseImageMappingTable(SQLModel, table=True):
    """Composite-key join table; rows live and die with their release or image."""

    __tablename__ = "release_image_mapping"

    release_id: int = Field(foreign_key="releases.id", primary_key=True)
    image_id: int = Field(foreign_key="images.id", primary_key=True, index=True)
