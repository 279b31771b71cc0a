from typing import List

from fastapi import APIRouter, Depends, HTTPException

from product_service.database import Database, get_database
from product_service.repository import ProductRepository
from product_service.schemas import (
    MessageResponse, ProductCreate, ProductCreatedResponse, ProductResponse, ProductUpdate
)

router = APIRouter(prefix="/api/products", tags=["products"])


def get_repository(db: Database = Depends(get_database)) -> ProductRepository:
    return ProductRepository(db)


@router.get("", response_model=List[ProductResponse])
async def list_products(repo: ProductRepository = Depends(get_repository)):
    """List all products, newest first."""
    return await repo.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, repo: ProductRepository = Depends(get_repository)):
    """Get a single product by ID."""
    product = await repo.get_product(product_id)

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    return product


@router.post("", response_model=ProductCreatedResponse)
async def create_product(product: ProductCreate, repo: ProductRepository = Depends(get_repository)):
    """Create a new product."""
    product_id = await repo.create_product(product)
    return ProductCreatedResponse(id=product_id, message="Product created successfully")


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    product_update: ProductUpdate,
    repo: ProductRepository = Depends(get_repository)
):
    """Replace all mutable fields of an existing product."""
    if not await repo.update_product(product_id, product_update):
        raise HTTPException(status_code=404, detail="Product not found")

    return MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, repo: ProductRepository = Depends(get_repository)):
    """Delete a single product."""
    if not await repo.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    return MessageResponse(message="Product deleted successfully")
