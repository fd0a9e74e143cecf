from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from ecorevive.domain.enums import Category, Condition, ProductStatus


class ProductModel(BaseModel):
    id: int
    title: str
    description: str
    price: Decimal = Field(gt=0, decimal_places=2)
    category: Category
    condition: Condition
    images: List[str] = Field(default_factory=list)
    location: str
    seller_id: int
    featured: bool = False
    is_new: bool = False
    status: ProductStatus = ProductStatus.AVAILABLE
    rating: float = Field(default=0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
