# ecorevive/services/product_service.py
from typing import List

from ecorevive.data.store import EntityStore
from ecorevive.data.models.product import ProductModel
from ecorevive.data.models.user import UserModel
from ecorevive.domain.enums import Role
from ecorevive.domain.errors import NotFoundError
from ecorevive.domain.schemas import ProductCreate, ProductSearch, ProductUpdate
from ecorevive.repos.product_repo import ProductRepo
from ecorevive.repos.user_repo import UserRepo
from ecorevive.services.product_search import search_products
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Katalog: zapytania (search, featured, get) i komendy sprzedawcy
    (create, update, delete). Modyfikowac moze tylko wlasciciel albo admin.
    """

    def __init__(self, store: EntityStore):
        self.repo = ProductRepo(store)
        self.users = UserRepo(store)

    #query
    def search(self, filters: ProductSearch | None = None) -> List[ProductModel]:
        return search_products(self.repo.list_products(), filters)

    def featured(self) -> List[ProductModel]:
        return self.repo.list_featured()

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    #commands
    def create_product(self, seller_id: int, payload: ProductCreate) -> ProductModel:
        seller = self._get_user(seller_id)
        if not seller.can_sell:
            raise PermissionError("Not authorized to create products")

        product = self.repo.create_product({**payload.model_dump(), "seller_id": seller.id})
        logger.info(f"Seller {seller.id} listed product {product.id} '{product.title}'")
        return product

    def update_product(self, user_id: int, product_id: int, payload: ProductUpdate) -> ProductModel:
        product = self.get_product(product_id)
        self._check_owner(self._get_user(user_id), product)

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        updated = self.repo.update_product(product_id, changes)
        logger.info(f"Product {product_id} updated by user {user_id}: {sorted(changes)}")
        return updated

    def delete_product(self, user_id: int, product_id: int) -> bool:
        product = self.get_product(product_id)
        self._check_owner(self._get_user(user_id), product)

        deleted = self.repo.delete_product(product_id)
        logger.info(f"Product {product_id} deleted by user {user_id}")
        return deleted

    def _get_user(self, user_id: int) -> UserModel:
        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def _check_owner(user: UserModel, product: ProductModel) -> None:
        if product.seller_id != user.id and user.role != Role.ADMIN:
            raise PermissionError("Not authorized to modify this product")
