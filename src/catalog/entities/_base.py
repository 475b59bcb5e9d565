from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with server-assigned identifier and timestamps.

    Server-assigned fields stay ``None`` until the value has been read back
    from the store; clients never supply them.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = PydanticField(
        default=None, description="Server-assigned identifier"
    )
    created_at: datetime | None = PydanticField(default=None)
    updated_at: datetime | None = PydanticField(default=None)


class EntityTable(SQLModel, table=False):
    """Base persistence model with an autoincrement key and audit timestamps."""

    id: int | None = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},  # refreshed by every UPDATE of the row
    )
