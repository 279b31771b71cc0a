from fastapi import APIRouter, Depends

from product_service.database import Database, get_database
from product_service.schemas import StatsResponse
from product_service.stats import fetch_stats

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def get_stats(db: Database = Depends(get_database)):
    """Inventory totals across all products."""
    return await fetch_stats(db)
