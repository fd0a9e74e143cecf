from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemModel(BaseModel):
    """Cena skopiowana w chwili zamowienia, nie referencja do produktu."""

    id: int
    order_id: int
    product_id: int
    quantity: int = Field(ge=1)
    price: Decimal = Field(gt=0, decimal_places=2)
