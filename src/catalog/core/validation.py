"""Per-operation required-field rules.

Validators never raise and never touch storage. They return the message for
the first missing field, or ``None`` when the value is good to go.
"""

from enum import StrEnum
from typing import Any

from src.catalog.entities.image.entity import Image
from src.catalog.entities.product.entity import Product
from src.catalog.entities.release.entity import Release


class Operation(StrEnum):
    CREATE = "create"
    LOOKUP = "lookup"
    UPDATE = "update"
    DELETE = "delete"


_CREATE_MSG = 'Missing field "{field}" required when creating a new {entity}'
_LOOKUP_MSG = 'Missing field "{field}" required when retrieving a {entity}'
_LOCATE_MSG = "Missing field {field} (needed to locate {entity} in DB)"
_NO_NEW_DATA_MSG = "No new data to update {entity} with"

_MESSAGES = {
    Operation.CREATE: _CREATE_MSG,
    Operation.LOOKUP: _LOOKUP_MSG,
    Operation.UPDATE: _LOCATE_MSG,
    Operation.DELETE: _LOCATE_MSG,
}

# (attribute, label) pairs, checked in order
_RELEASE_KEY = (("product_id", "Product Id"), ("name", "Name"))
_PRODUCT_KEY = (("name", "Name"),)
_IMAGE_KEY = (("id", "Id"),)
_IMAGE_CREATE = (
    ("image_type", "Image Type"),
    ("software_name", "Software Name"),
    ("image_name", "Image Name"),
)

_RELEASE_MUTABLE = ("tarball_link",)
_IMAGE_MUTABLE = ("image_type", "software_name", "image_name", "release_ids")


def _first_missing(
    value: Any, fields: tuple[tuple[str, str], ...], template: str, entity: str
) -> str | None:
    for attribute, label in fields:
        if getattr(value, attribute) is None:
            return template.format(field=label, entity=entity)
    return None


def _has_any(value: Any, attributes: tuple[str, ...]) -> bool:
    return any(getattr(value, attribute) is not None for attribute in attributes)


def validate_release(release: Release, operation: Operation) -> str | None:
    """Check the fields a release operation needs.

    Every operation locates the release by ``(product_id, name)``; an update
    must also carry at least one mutable field.
    """
    error = _first_missing(release, _RELEASE_KEY, _MESSAGES[operation], "release")
    if error is not None:
        return error
    if operation is Operation.UPDATE and not _has_any(release, _RELEASE_MUTABLE):
        return _NO_NEW_DATA_MSG.format(entity="release")
    return None


def validate_product(product: Product, operation: Operation) -> str | None:
    """Check the fields a product operation needs.

    For an update, ``product.name`` is the *new* name; the current name
    travels separately as the lookup key.
    """
    if operation is Operation.UPDATE:
        if product.name is None:
            return _NO_NEW_DATA_MSG.format(entity="product")
        return None
    return _first_missing(product, _PRODUCT_KEY, _MESSAGES[operation], "product")


def validate_image(image: Image, operation: Operation) -> str | None:
    if operation is Operation.CREATE:
        return _first_missing(image, _IMAGE_CREATE, _CREATE_MSG, "image")
    error = _first_missing(image, _IMAGE_KEY, _MESSAGES[operation], "image")
    if error is not None:
        return error
    if operation is Operation.UPDATE and not _has_any(image, _IMAGE_MUTABLE):
        return _NO_NEW_DATA_MSG.format(entity="image")
    return None
