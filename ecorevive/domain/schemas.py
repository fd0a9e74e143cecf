# ecorevive/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime

from ecorevive.domain.enums import Category, Condition, OrderStatus, ProductStatus, Role, SortBy


# =====================================================
# USERS
# =====================================================
class UserCreate(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    username: str = Field(..., min_length=3, max_length=50, description="Login (unikalny)")
    password: str = Field(..., min_length=6, max_length=128, description="Haslo w postaci jawnej")
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=100)
    location: Optional[str] = Field(None, max_length=100)
    role: Role = Role.BUYER

    @field_validator("role")
    @classmethod
    def no_self_promoted_admins(cls, v: Role) -> Role:
        if v == Role.ADMIN:
            raise ValueError("admin accounts cannot be registered")
        return v


class UserLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    """Schema dla uzytkownika (response), bez hasla."""

    id: int
    username: str
    email: str
    full_name: str
    location: Optional[str] = None
    role: Role
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# PRODUCTS
# =====================================================
class ProductCreate(BaseModel):
    """Schema dla wystawienia produktu przez sprzedawce."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, decimal_places=2, description="Cena (musi byc > 0, max 2 miejsca po przecinku)")
    category: Category
    condition: Condition
    images: List[str] = Field(default_factory=list, max_length=6)
    location: str = Field(..., min_length=1, max_length=100)
    featured: bool = False
    is_new: bool = False


class ProductUpdate(BaseModel):
    """Czesciowa aktualizacja, tylko przeslane pola."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, gt=0, decimal_places=2)
    category: Optional[Category] = None
    condition: Optional[Condition] = None
    images: Optional[List[str]] = Field(None, max_length=6)
    location: Optional[str] = Field(None, min_length=1, max_length=100)
    featured: Optional[bool] = None
    is_new: Optional[bool] = None
    status: Optional[ProductStatus] = None


class ProductRead(BaseModel):
    id: int
    title: str
    description: str
    price: Decimal
    category: Category
    condition: Condition
    images: List[str]
    location: str
    seller_id: int
    featured: bool
    is_new: bool
    status: ProductStatus
    rating: float
    review_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductSearch(BaseModel):
    """
    Filtry katalogu. Brak pola = brak ograniczenia.
    Odwrocony zakres cen nie jest bledem, daje pusty wynik.
    """

    query: Optional[str] = None
    category: Optional[Category] = None
    price_min: Optional[Decimal] = Field(None, ge=0)
    price_max: Optional[Decimal] = Field(None, ge=0)
    condition: Optional[Condition] = None
    location: Optional[str] = None
    featured: Optional[bool] = None
    is_new: Optional[bool] = None
    sort_by: Optional[SortBy] = None


# =====================================================
# CART
# =====================================================
class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi byc > 0)")
    quantity: int = Field(1, gt=0, description="Ilosc produktu (musi byc > 0)")


class QuantityIn(BaseModel):
    quantity: int = Field(..., gt=0, description="Nowa ilosc (musi byc > 0)")


class CartItemOut(BaseModel):
    """Pozycja koszyka z aktualnymi danymi produktu."""

    id: int
    product_id: int
    quantity: int
    product: Optional[ProductRead] = None
    line_total: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response), sumy liczone przy kazdym odczycie."""

    user_id: int
    items: List[CartItemOut]
    subtotal: Decimal
    shipping: Decimal
    total: Decimal


# =====================================================
# ORDERS / PAYMENTS
# =====================================================
class OrderCreate(BaseModel):
    """Schema dla checkoutu."""

    shipping_address: str = Field(..., min_length=1, max_length=500)


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    status: OrderStatus
    total: Decimal
    shipping_address: str
    payment_reference: Optional[str] = None
    created_at: datetime
    items: List[OrderItemOut] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class OrderStatusIn(BaseModel):
    status: OrderStatus


class PaymentIntentOut(BaseModel):
    order_id: int
    payment_reference: str
    client_secret: str
    amount: Decimal
    currency: str


class CheckoutOut(BaseModel):
    order: OrderOut
    payment: PaymentIntentOut


class PaymentEventIn(BaseModel):
    """Zdarzenie z webhooka bramki platnosci."""

    payment_reference: str = Field(..., min_length=1)
    order_id: int = Field(..., gt=0)
    succeeded: bool
