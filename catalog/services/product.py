# services/product.py
from typing import Any, List, Mapping

from sqlalchemy import delete, update

from catalog.config import MAX_INT, STOCK_FLOOR
from catalog.exceptions import BelowFloor, DuplicateError, NotFound, ValidationError
from catalog.models.database_models import Product
from catalog.models.registry import from_orm, resolve_payload
from catalog.models.schemas.product import DeletionResult, ProductBase
from catalog.utils.logging import get_logger

from catalog.services.base import BaseService

logger = get_logger(__name__)


def _check_quantity(quantity: Any) -> int:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError("Quantity must be an integer")
    if not 0 < quantity <= MAX_INT:
        raise ValidationError(f"Quantity must be an integer between 1 and {MAX_INT}")
    return quantity


def _in_range(product_id: Any) -> bool:
    return isinstance(product_id, int) and 0 <= product_id <= MAX_INT


class ProductService(BaseService[Product]):
    floor = STOCK_FLOOR

    async def _get_row(self, product_id: int) -> Product:
        if not _in_range(product_id):
            raise NotFound("ID Product Not Found")
        row = await self._handle_db_operation(
            lambda: self.db.get(Product, product_id), commit=False
        )
        if row is None:
            raise NotFound("ID Product Not Found")
        return row

    async def list_all(self) -> List[ProductBase]:
        rows = await self._handle_db_operation(
            lambda: self.db.query(Product).all(), commit=False
        )
        return [from_orm(row) for row in rows]

    async def get_by_id(self, product_id: int) -> ProductBase:
        return from_orm(await self._get_row(product_id))

    async def create(self, payload: Mapping[str, Any]) -> ProductBase:
        product = resolve_payload(payload)

        existing = await self._handle_db_operation(
            lambda: self.db.get(Product, product.id), commit=False
        )
        if existing is not None:
            raise DuplicateError(f"Product {product.id} already exists")

        row = Product(**product.to_orm_dict())
        await self._handle_db_operation(lambda: self.db.add(row) or self.db.flush())
        logger.info("Created product {} ({})", product.id, type(product).__name__)
        return product

    async def update(self, product_id: int, payload: Mapping[str, Any]) -> ProductBase:
        """Replace every field of an existing product with ``payload``."""
        row = await self._get_row(product_id)
        product = resolve_payload(payload)
        if product.id != product_id:
            raise ValidationError(
                f"Product id {product.id} in body does not match {product_id}"
            )

        def overwrite():
            for field, value in product.to_orm_dict().items():
                setattr(row, field, value)
            self.db.flush()

        await self._handle_db_operation(overwrite)
        return product

    async def delete(self, product_id: int) -> DeletionResult:
        await self._get_row(product_id)
        result = await self._handle_db_operation(
            lambda: self.db.execute(delete(Product).where(Product.id == product_id))
        )
        return DeletionResult(acknowledged=True, deleted_count=result.rowcount)

    async def restock(self, product_id: int, quantity: int) -> ProductBase:
        quantity = _check_quantity(quantity)
        if not _in_range(product_id):
            raise NotFound("ID Product Not Found")
        statement = (
            update(Product)
            .where(Product.id == product_id, Product.stock <= MAX_INT - quantity)
            .values(stock=Product.stock + quantity)
            .execution_options(synchronize_session=False)
        )
        changed, product = await self._handle_db_operation(lambda: self._apply(statement, product_id))
        if product is None:
            raise NotFound("ID Product Not Found")
        if not changed:
            raise ValidationError(f"Stock cannot exceed {MAX_INT}")
        return product

    async def sell(self, product_id: int, quantity: int) -> ProductBase:
        """Take ``quantity`` units out of stock unless that would leave fewer than the floor.

        The floor check and the decrement are one conditional UPDATE, so
        concurrent sales of the same product cannot both pass the check.
        """
        quantity = _check_quantity(quantity)
        if not _in_range(product_id):
            raise NotFound("ID Product Not Found")
        statement = (
            update(Product)
            .where(Product.id == product_id, Product.stock - quantity >= self.floor)
            .values(stock=Product.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        changed, product = await self._handle_db_operation(lambda: self._apply(statement, product_id))
        if product is None:
            raise NotFound("ID Product Not Found")
        if not changed:
            logger.info("Refused sale of {} units of product {} (stock {})", quantity, product_id, product.stock)
            raise BelowFloor(f"Stock is less than {self.floor}")
        return product

    def _apply(self, statement, product_id: int):
        """Run a stock UPDATE and read the row back inside the same transaction."""
        changed = self.db.execute(statement).rowcount == 1
        row = self.db.get(Product, product_id, populate_existing=True)
        return changed, from_orm(row) if row is not None else None
