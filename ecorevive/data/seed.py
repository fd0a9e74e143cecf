# ecorevive/data/seed.py
from decimal import Decimal

from ecorevive.data.store import EntityStore
from ecorevive.domain.enums import Category, Condition, Role
from ecorevive.domain.schemas import ProductCreate, UserCreate
from ecorevive.services.product_service import ProductService
from ecorevive.services.user_service import UserService
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {
        "title": "Reclaimed Wood Coffee Table",
        "description": "Coffee table built from reclaimed barn wood, sealed with natural oil.",
        "price": Decimal("189.00"),
        "category": Category.FURNITURE,
        "condition": Condition.EXCELLENT,
        "location": "Portland, OR",
        "featured": True,
    },
    {
        "title": "Upcycled Denim Tote",
        "description": "Sturdy tote bag sewn from old jeans.",
        "price": Decimal("34.50"),
        "category": Category.FASHION,
        "condition": Condition.NEW,
        "location": "Austin, TX",
        "is_new": True,
    },
    {
        "title": "Vintage Glass Bottle Lamp",
        "description": "Table lamp made from a vintage glass bottle with LED bulb.",
        "price": Decimal("45.00"),
        "category": Category.HOME_DECOR,
        "condition": Condition.LIKE_NEW,
        "location": "Portland, OR",
        "featured": True,
    },
    {
        "title": "Refurbished Turntable",
        "description": "Belt-drive turntable, new belt and stylus.",
        "price": Decimal("120.00"),
        "category": Category.ELECTRONICS,
        "condition": Condition.GOOD,
        "location": "Chicago, IL",
    },
]


def seed(store: EntityStore) -> None:
    # not forcing: only seed if empty
    users = UserService(store)
    if users.repo.count():
        return

    admin = users.register(
        UserCreate(
            username="admin",
            password="admin123",
            email="admin@ecorevive.com",
            full_name="Admin User",
        )
    )
    # rejestracja nie pozwala na role admin
    admin = users.repo.update_user(admin.id, {"role": Role.ADMIN})

    products = ProductService(store)
    for data in SAMPLE_PRODUCTS:
        products.create_product(admin.id, ProductCreate(**data))

    logger.info(f"Seeded admin user and {len(SAMPLE_PRODUCTS)} sample products")
