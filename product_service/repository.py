from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.sql import func

from product_service.database import Database
from product_service.models.product import products_table
from product_service.schemas import ProductCreate, ProductUpdate

_MUTABLE_FIELDS = ("name", "category", "quantity", "price", "description")


class ProductRepository:
    """One statement per operation against the shared pool."""

    def __init__(self, db: Database):
        self.db = db

    async def list_products(self) -> List[Dict[str, Any]]:
        """All products, most recently created first."""
        result = await self.db.execute(
            select(products_table).order_by(
                products_table.c.created_at.desc(), products_table.c.id.desc()
            )
        )
        return result.rows

    async def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        result = await self.db.execute(
            select(products_table).where(products_table.c.id == product_id)
        )
        return result.first()

    async def create_product(self, product: ProductCreate) -> int:
        """Insert a product and return its generated id."""
        result = await self.db.execute(
            insert(products_table)
            .values(**product.model_dump(include=set(_MUTABLE_FIELDS)))
            .returning(products_table.c.id)
        )
        return result.rows[0]["id"]

    async def update_product(self, product_id: int, product: ProductUpdate) -> bool:
        """
        Replace every mutable field and refresh updated_at.

        Returns False when no row has the given id.
        """
        values = {name: getattr(product, name) for name in _MUTABLE_FIELDS}
        result = await self.db.execute(
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(**values, updated_at=func.now())
        )
        return result.rowcount > 0

    async def delete_product(self, product_id: int) -> bool:
        result = await self.db.execute(
            delete(products_table).where(products_table.c.id == product_id)
        )
        return result.rowcount > 0
