from sqlalchemy import func, select

from product_service.database import Database
from product_service.models.product import products_table
from product_service.schemas import StatsResponse


async def fetch_stats(db: Database) -> StatsResponse:
    """Aggregate totals over the whole table; an empty table yields zeros."""
    c = products_table.c
    result = await db.execute(
        select(
            func.count().label("total_products"),
            func.coalesce(func.sum(c.quantity), 0).label("total_items"),
            func.count(c.category.distinct()).label("categories"),
            func.coalesce(func.sum(c.quantity * c.price), 0).label("total_value"),
        ).select_from(products_table)
    )
    return StatsResponse(**result.rows[0])
