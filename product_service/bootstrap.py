import logging
from decimal import Decimal

from sqlalchemy import func, insert, select

from product_service.database import Database
from product_service.models.product import Base, products_table

logger = logging.getLogger(__name__)

SEED_PRODUCTS = [
    {"name": "Laptop Pro", "category": "Electronics", "quantity": 15,
     "price": Decimal("1299.99"), "description": "High-performance laptop"},
    {"name": "Wireless Mouse", "category": "Electronics", "quantity": 45,
     "price": Decimal("29.99"), "description": "Ergonomic wireless mouse"},
    {"name": "Office Chair", "category": "Furniture", "quantity": 8,
     "price": Decimal("199.99"), "description": "Comfortable office chair"},
    {"name": "Coffee Beans", "category": "Food", "quantity": 120,
     "price": Decimal("12.99"), "description": "Premium coffee beans"},
    {"name": "Notebook Set", "category": "Office Supplies", "quantity": 200,
     "price": Decimal("8.99"), "description": "Pack of 3 notebooks"},
]


async def bootstrap_database(db: Database) -> int:
    """
    Create the products table if missing and seed it when empty.

    Safe to run on every startup. Returns the number of rows inserted.
    Errors propagate; the caller treats them as fatal.
    """
    await db.run_sync(Base.metadata.create_all)
    logger.info("Table '%s' ensured", products_table.name)

    result = await db.execute(select(func.count().label("total")).select_from(products_table))
    count = result.rows[0]["total"]
    if count != 0:
        logger.info("Found %s existing products, skipping seed", count)
        return 0

    for product in SEED_PRODUCTS:
        await db.execute(insert(products_table).values(**product))

    logger.info("Seeded %s sample products", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
