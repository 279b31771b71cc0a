from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# NUMERIC(12, 2) values travel as JSON numbers, not strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# Product Schemas
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Product category")
    quantity: int = Field(..., description="Units in stock")
    price: Decimal = Field(..., description="Unit price")
    description: Optional[str] = Field(None, description="Product description")


class ProductUpdate(BaseModel):
    """Full replacement of the mutable fields; omitted fields are written as NULL."""

    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None


class ProductResponse(BaseModel):
    id: int
    name: str
    category: str
    quantity: int
    price: Money
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductCreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str


# Stats Schemas
class StatsResponse(BaseModel):
    total_products: int = 0
    total_items: int = 0
    categories: int = 0
    total_value: float = 0
