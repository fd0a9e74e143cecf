from typing import Any, Dict, List

from ecorevive.data.store import EntityStore
from ecorevive.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, store: EntityStore):
        self.store = store

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.store.products.get(product_id)

    def list_products(self) -> List[ProductModel]:
        return self.store.products.all()

    def list_featured(self) -> List[ProductModel]:
        return self.store.products.find(lambda p: p.featured)

    def create_product(self, fields: Dict[str, Any]) -> ProductModel:
        return self.store.products.create(fields)

    def update_product(self, product_id: int, partial: Dict[str, Any]) -> ProductModel | None:
        return self.store.products.update(product_id, partial)

    def delete_product(self, product_id: int) -> bool:
        return self.store.products.delete(product_id)
