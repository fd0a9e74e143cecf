from datetime import datetime, timezone

from pydantic import BaseModel, Field


class CartItemModel(BaseModel):
    id: int
    user_id: int
    product_id: int
    quantity: int = Field(ge=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
