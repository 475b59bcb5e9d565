"""Entity: ReleaseImageMapping."""

from pydantic import BaseModel


class ReleaseImageMapping(BaseModel):
    """Join record linking one release to one image. Never edited in place."""

    release_id: int
    image_id: int
