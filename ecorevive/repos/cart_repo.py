# ecorevive/repos/cart_repo.py
from typing import List

from ecorevive.data.store import EntityStore
from ecorevive.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, store: EntityStore):
        self.store = store

    def get_cart_items(self, user_id: int) -> List[CartItemModel]:
        return self.store.cart_items.find(lambda i: i.user_id == user_id)

    def get_cart_item(self, user_id: int, product_id: int) -> CartItemModel | None:
        found = self.store.cart_items.find(
            lambda i: i.user_id == user_id and i.product_id == product_id
        )
        return found[0] if found else None

    def get_item(self, item_id: int) -> CartItemModel | None:
        return self.store.cart_items.get(item_id)

    def add_cart_item(self, user_id: int, product_id: int, quantity: int) -> CartItemModel:
        return self.store.cart_items.create(
            {"user_id": user_id, "product_id": product_id, "quantity": quantity}
        )

    def update_quantity(self, item_id: int, quantity: int) -> CartItemModel | None:
        return self.store.cart_items.update(item_id, {"quantity": quantity})

    def delete_cart_item(self, item_id: int) -> bool:
        return self.store.cart_items.delete(item_id)

    def delete_cart_items(self, user_id: int) -> int:
        items = self.get_cart_items(user_id)
        return sum(1 for i in items if self.store.cart_items.delete(i.id))
