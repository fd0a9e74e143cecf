# ecorevive/repos/order_repo.py
from typing import Any, Dict, List

from ecorevive.data.store import EntityStore
from ecorevive.data.models.order import OrderModel
from ecorevive.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, store: EntityStore):
        self.store = store

    def create_order(self, fields: Dict[str, Any]) -> OrderModel:
        return self.store.orders.create(fields)

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.store.orders.get(order_id)

    def list_user_orders(self, user_id: int) -> List[OrderModel]:
        return self.store.orders.find(lambda o: o.user_id == user_id)

    def update_order(self, order_id: int, partial: Dict[str, Any]) -> OrderModel | None:
        return self.store.orders.update(order_id, partial)

    def create_order_item(self, fields: Dict[str, Any]) -> OrderItemModel:
        return self.store.order_items.create(fields)

    def get_order_items(self, order_id: int) -> List[OrderItemModel]:
        return self.store.order_items.find(lambda i: i.order_id == order_id)
