"""Product CRUD service."""

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import NotFoundError
from src.catalog.core.services.catalog.base import CatalogService
from src.catalog.core.validation import Operation, validate_product
from src.catalog.entities.product import Product, ProductRepository
from src.catalog.entities.release import ReleaseRepository
from src.catalog.entities.release_image import ReleaseImageMappingRepository


class ProductService(CatalogService):
    """Create, read, rename and delete products."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._products = ProductRepository(session)
        self._releases = ReleaseRepository(session)
        self._mappings = ReleaseImageMappingRepository(session)

    def _get_existing(self, name: str) -> Product:
        product = self._products.get_by_name(name)
        if product is None:
            raise NotFoundError(f'Product "{name}" not found')
        return product

    def create(self, product: Product) -> Product:
        self._require(validate_product(product, Operation.CREATE))

        with self._unit_of_work("Error creating new product", commit=True):
            self._products.insert(product.name)
            created = self._get_existing(product.name)

        logger.bind(product=created.name).info("Product has been successfully created")
        return created

    def get(self, name: str | None) -> Product:
        self._require(validate_product(Product(name=name), Operation.LOOKUP))

        with self._unit_of_work("Error finding product"):
            return self._get_existing(name)

    def list_all(self) -> list[Product]:
        with self._unit_of_work("Error listing products"):
            return self._products.list_all()

    def update(self, current_name: str, product: Product) -> Product:
        """Rename ``current_name`` to ``product.name``."""
        self._require(validate_product(Product(name=current_name), Operation.LOOKUP))
        self._require(validate_product(product, Operation.UPDATE))

        with self._unit_of_work("Error updating product", commit=True):
            self._get_existing(current_name)
            self._products.rename(current_name, product.name)
            updated = self._get_existing(product.name)

        logger.bind(product=updated.name).info("Product has been successfully updated")
        return updated

    def delete(self, name: str | None) -> None:
        """Delete a product together with its releases and their image links."""
        self._require(validate_product(Product(name=name), Operation.DELETE))

        with self._unit_of_work("Error deleting product", commit=True):
            product = self._get_existing(name)
            for release_id in self._releases.list_ids_for_product(product.id):
                self._mappings.delete_for_release(release_id)
                self._releases.delete(release_id)
            self._products.delete(product.id)

        logger.bind(product=name).info("Product has been successfully deleted")
