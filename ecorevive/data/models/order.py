from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from ecorevive.domain.enums import OrderStatus


class OrderModel(BaseModel):
    id: int
    user_id: int

    status: OrderStatus = OrderStatus.PENDING  # PENDING, PAID, COMPLETED, CANCELLED
    total: Decimal = Field(gt=0)
    shipping_address: str
    payment_reference: Optional[str] = None
    # wszystkie intenty wydane dla zamowienia, webhook moze przyjsc dla starszego
    payment_references: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
