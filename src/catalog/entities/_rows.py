"""Row scanning helpers shared by the repositories.

Repositories select explicit column tuples in a fixed order and hand each row
to a scan function that unpacks it positionally into an entity value.
"""

from collections.abc import Callable, Iterable
from contextlib import closing
from typing import Any, TypeVar

from pydantic import ValidationError

from src.catalog.core.errors import StorageError

T = TypeVar("T")


def scan_into(factory: Callable[..., T], fields: tuple[str, ...], row: Iterable[Any]) -> T:
    """Build ``factory(**fields)`` from a positional row.

    Raises:
        StorageError: The row has the wrong arity or a value fails validation.
    """
    values = tuple(row)
    if len(values) != len(fields):
        raise StorageError(
            f"Error scanning row: expected {len(fields)} columns, got {len(values)}"
        )
    try:
        return factory(**dict(zip(fields, values, strict=True)))
    except ValidationError as e:
        raise StorageError(f"Error scanning row: {e}") from e


def scan_one(result: Any, scan: Callable[[Any], T]) -> T | None:
    """Scan the first row of ``result`` or return ``None`` when there is none."""
    with closing(result):
        row = result.first()
    if row is None:
        return None
    return scan(row)


def scan_all(result: Any, scan: Callable[[Any], T]) -> list[T]:
    """Scan every row of ``result`` into an ordered list.

    The cursor is closed on every exit path. A failure on any row propagates
    and the rows scanned so far are dropped with the local list.
    """
    scanned: list[T] = []
    with closing(result):
        for row in result:
            scanned.append(scan(row))
    return scanned
