# ecorevive/data/store.py
"""
Magazyn encji w pamieci.

Jedna tabela na typ encji, kazda z wlasnym licznikiem id (od 1, rosnacy,
nigdy nie uzyty ponownie). Odczyty zwracaja glebokie kopie, wiec zmiana
zwroconego obiektu nie zmienia stanu magazynu.

Magazyn jest tworzony jawnie (raz na proces albo raz na test) i
przekazywany do repozytoriow; aplikacja trzyma go w app.state.store.
"""
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from ecorevive.data.models import (
    UserModel,
    ProductModel,
    CartItemModel,
    OrderModel,
    OrderItemModel,
)

M = TypeVar("M", bound=BaseModel)


class Table(Generic[M]):
    def __init__(self, model: Type[M]):
        self.model = model
        self._rows: Dict[int, M] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, row_id: int) -> M | None:
        row = self._rows.get(row_id)
        return row.model_copy(deep=True) if row is not None else None

    def all(self) -> List[M]:
        # dict zachowuje kolejnosc wstawiania = kolejnosc id
        return [row.model_copy(deep=True) for row in self._rows.values()]

    def find(self, predicate: Callable[[M], bool]) -> List[M]:
        return [row for row in self.all() if predicate(row)]

    def create(self, fields: Dict[str, Any]) -> M:
        data = {k: v for k, v in fields.items() if k != "id"}
        # walidacja przed zuzyciem id
        row = self.model.model_validate({**data, "id": self._next_id})
        self._rows[row.id] = row
        self._next_id += 1
        return row.model_copy(deep=True)

    def update(self, row_id: int, partial: Dict[str, Any]) -> M | None:
        row = self._rows.get(row_id)
        if row is None:
            return None

        data = row.model_dump()
        data.update({k: v for k, v in partial.items() if k != "id"})
        updated = self.model.model_validate(data)
        self._rows[row_id] = updated
        return updated.model_copy(deep=True)

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None


class EntityStore:
    def __init__(self):
        self.users: Table[UserModel] = Table(UserModel)
        self.products: Table[ProductModel] = Table(ProductModel)
        self.cart_items: Table[CartItemModel] = Table(CartItemModel)
        self.orders: Table[OrderModel] = Table(OrderModel)
        self.order_items: Table[OrderItemModel] = Table(OrderItemModel)


def get_store(request: Request) -> EntityStore:
    return request.app.state.store
