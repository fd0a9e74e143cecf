# ecorevive/domain/enums.py
from enum import Enum


class Category(str, Enum):
    HOME_DECOR = "Home Decor"
    FURNITURE = "Furniture"
    FASHION = "Fashion"
    ART_CRAFTS = "Art & Crafts"
    ELECTRONICS = "Electronics"
    JEWELRY = "Jewelry"
    GARDEN = "Garden"
    OTHER = "Other"


class Condition(str, Enum):
    NEW = "New"
    LIKE_NEW = "Like New"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"


class ProductStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"


class Role(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SortBy(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    # popularnosc = malejacy rating sprzedawcy/produktu
    POPULAR = "popular"
