"""Product data access."""

from functools import partial

from sqlalchemy import delete, insert, update
from sqlmodel import Session, select

from src.catalog.entities._rows import scan_all, scan_into, scan_one
from src.catalog.entities.product.entity import Product
from src.catalog.entities.product.table import ProductTable

PRODUCT_FIELDS = ("id", "name", "created_at", "updated_at")
PRODUCT_COLUMNS = (
    ProductTable.id,
    ProductTable.name,
    ProductTable.created_at,
    ProductTable.updated_at,
)

_products = ProductTable.__table__
scan_product = partial(scan_into, Product, PRODUCT_FIELDS)


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert(self, name: str) -> None:
        self._session.exec(insert(_products).values(name=name))

    def get_by_name(self, name: str) -> Product | None:
        statement = select(*PRODUCT_COLUMNS).where(ProductTable.name == name)
        return scan_one(self._session.exec(statement), scan_product)

    def get_by_id(self, product_id: int) -> Product | None:
        statement = select(*PRODUCT_COLUMNS).where(ProductTable.id == product_id)
        return scan_one(self._session.exec(statement), scan_product)

    def list_all(self) -> list[Product]:
        statement = select(*PRODUCT_COLUMNS).order_by(ProductTable.id)
        return scan_all(self._session.exec(statement), scan_product)

    def rename(self, current_name: str, new_name: str) -> int:
        """Rename a product; returns the number of rows touched."""
        statement = (
            update(_products).where(_products.c.name == current_name).values(name=new_name)
        )
        return self._session.exec(statement).rowcount

    def delete(self, product_id: int) -> int:
        statement = delete(_products).where(_products.c.id == product_id)
        return self._session.exec(statement).rowcount
