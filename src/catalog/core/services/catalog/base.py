"""Shared plumbing for the catalog entity services."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.catalog.core.errors import CatalogError, ConflictError, StorageError, ValidationFailure


class CatalogService:
    """Base class holding the injected session.

    Every public operation runs inside :meth:`_unit_of_work`, which turns
    driver failures into catalog errors carrying the operation context and
    makes multi-statement writes atomic.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _require(error: str | None) -> None:
        """Raise the validation message returned by a validator, if any."""
        if error is not None:
            raise ValidationFailure(error)

    @contextmanager
    def _unit_of_work(self, context: str, *, commit: bool = False) -> Iterator[None]:
        try:
            yield
            if commit:
                self._session.commit()
        except CatalogError:
            self._session.rollback()
            raise
        except IntegrityError as e:
            self._session.rollback()
            raise ConflictError(f"{context}: {e.orig}") from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.bind(error_type=type(e).__name__).error("{}: {}", context, e)
            raise StorageError(f"{context}: {e}") from e
