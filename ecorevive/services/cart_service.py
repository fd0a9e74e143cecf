from decimal import Decimal
from typing import Dict, Any, List, Tuple

from ecorevive.data.store import EntityStore
from ecorevive.data.models.cart_item import CartItemModel
from ecorevive.domain.errors import NotFoundError, ValidationError
from ecorevive.repos.cart_repo import CartRepo
from ecorevive.repos.product_repo import ProductRepo
from ecorevive.utils.money import ZERO, to_cents
from ecorevive.utils.settings import FLAT_SHIPPING_RATE
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)


def compute_totals(
    lines: List[Tuple[Decimal, int]],
    shipping_rate: Decimal = FLAT_SHIPPING_RATE,
) -> Dict[str, Decimal]:
    """subtotal = suma(cena * ilosc), wysylka stala gdy koszyk niepusty."""
    subtotal = to_cents(sum((price * qty for price, qty in lines), ZERO))
    shipping = to_cents(shipping_rate) if lines else ZERO
    return {
        "subtotal": subtotal,
        "shipping": shipping,
        "total": subtotal + shipping,
    }


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError("Quantity must be an integer >= 1")


class CartService:
    """
    Prosta implementacja cqrs dla domeny cart
    commands (add, update, remove, clear) modyfikuja stan
    query (get) tylko odczyt, sumy liczone zawsze od nowa z aktualnych cen
    """

    def __init__(self, store: EntityStore, shipping_rate: Decimal = FLAT_SHIPPING_RATE):
        self.repo = CartRepo(store)
        self.products = ProductRepo(store)
        self.shipping_rate = shipping_rate

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        items = self.repo.get_cart_items(user_id)

        lines = []
        priced = []
        for i in items:
            product = self.products.get_product(i.product_id)
            line_total = to_cents(product.price * i.quantity) if product else ZERO
            if product:
                priced.append((product.price, i.quantity))
            #produkt mogl zniknac, pozycja zostaje ale bez ceny
            lines.append(
                {
                    "id": i.id,
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "product": product,
                    "line_total": line_total,
                }
            )

        return {
            "user_id": user_id,
            "items": lines,
            **compute_totals(priced, self.shipping_rate),
        }

    #commands
    def add_to_cart(self, user_id: int, product_id: int, quantity: int = 1) -> CartItemModel:
        _check_quantity(quantity)

        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        # ten sam produkt drugi raz = zwiekszenie ilosci, nigdy drugi wiersz
        existing_item = self.repo.get_cart_item(user_id, product_id)

        if existing_item:
            new_quantity = existing_item.quantity + quantity
            logger.info(
                f"Product {product_id} already in cart of user {user_id}, "
                f"quantity {existing_item.quantity} -> {new_quantity}"
            )
            return self.repo.update_quantity(existing_item.id, new_quantity)

        item = self.repo.add_cart_item(user_id, product_id, quantity)
        logger.info(f"Added product {product_id} x{quantity} to cart of user {user_id}")
        return item

    def update_quantity(self, user_id: int, item_id: int, quantity: int) -> CartItemModel:
        _check_quantity(quantity)

        item = self.repo.get_item(item_id)
        if not item or item.user_id != user_id:
            raise NotFoundError("Cart item not found")

        logger.info(f"Cart item {item_id}: quantity {item.quantity} -> {quantity}")
        return self.repo.update_quantity(item_id, quantity)

    def remove_item(self, user_id: int, item_id: int) -> bool:
        item = self.repo.get_item(item_id)
        if not item or item.user_id != user_id:
            return False

        removed = self.repo.delete_cart_item(item_id)
        logger.info(f"Removed cart item {item_id} (product {item.product_id}) for user {user_id}")
        return removed

    def clear_cart(self, user_id: int) -> int:
        removed = self.repo.delete_cart_items(user_id)
        logger.info(f"Cleared {removed} cart items for user {user_id}")
        return removed
