# ecorevive/services/order_service.py
import uuid
from typing import Any, Dict, List, Tuple

from redis.exceptions import RedisError

from ecorevive.data.store import EntityStore
from ecorevive.data.models.order import OrderModel
from ecorevive.domain.enums import OrderStatus, Role
from ecorevive.domain.errors import (
    ConflictError,
    NotFoundError,
    PreconditionError,
    ServiceUnavailableError,
    ValidationError,
)
from ecorevive.repos.cart_repo import CartRepo
from ecorevive.repos.order_repo import OrderRepo
from ecorevive.repos.product_repo import ProductRepo
from ecorevive.repos.user_repo import UserRepo
from ecorevive.services.lock_service import LockService
from ecorevive.services.payment_client import PaymentClient
from ecorevive.utils.money import ZERO, to_cents
from ecorevive.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)

_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.CANCELLED},
    OrderStatus.PAID: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Separacja od CartService: koszyk tylko czytamy i czyscimy po zamowieniu.
    """

    def __init__(
        self,
        store: EntityStore,
        payment_client: PaymentClient | None = None,
        lock_service: LockService | None = None,
        lock_ttl: int = CHECKOUT_LOCK_TTL_SECONDS,
    ):
        self.repo = OrderRepo(store)
        self.carts = CartRepo(store)
        self.products = ProductRepo(store)
        self.users = UserRepo(store)
        self.payment_client = payment_client
        self.lock_service = lock_service
        self.lock_ttl = lock_ttl

    def create_order(self, user_id: int, shipping_address: str) -> OrderModel:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Waliduje adres i sprawdza, czy koszyk nie jest pusty
        2. Pobiera wszystkie produkty ZANIM cokolwiek zapisze
        3. Oblicza total z aktualnych cen
        4. Tworzy zamowienie (pending) i pozycje z zamrozona cena
        5. Czysci koszyk

        Magazyn nie ma transakcji, wiec wszystkie walidacje sa przed
        pierwszym zapisem; blad w 1-2 nie zostawia zadnych zmian.
        """
        address = (shipping_address or "").strip()
        if not address:
            raise ValidationError("Shipping address is required")

        items = self.carts.get_cart_items(user_id)
        if not items:
            raise PreconditionError("Cart is empty")

        lines = []
        for item in items:
            product = self.products.get_product(item.product_id)
            if not product:
                raise PreconditionError(
                    f"Product {item.product_id} in cart is no longer available"
                )
            lines.append((item, product))

        total = to_cents(sum((p.price * i.quantity for i, p in lines), ZERO))

        order = self.repo.create_order(
            {
                "user_id": user_id,
                "status": OrderStatus.PENDING,
                "total": total,
                "shipping_address": address,
            }
        )

        for item, product in lines:
            # kopia ceny, pozniejsza zmiana produktu nie zmienia zamowienia
            self.repo.create_order_item(
                {
                    "order_id": order.id,
                    "product_id": product.id,
                    "quantity": item.quantity,
                    "price": product.price,
                }
            )

        cleared = self.carts.delete_cart_items(user_id)

        logger.info(
            f"Order {order.id} created for user {user_id}: "
            f"{len(lines)} lines, total {total}, {cleared} cart items cleared"
        )
        return order

    def create_payment_intent(self, user_id: int, order_id: int) -> Dict[str, Any]:
        if self.payment_client is None:
            raise RuntimeError("Payment client is not configured")

        order = self._get_owned_order(user_id, order_id)

        if order.status != OrderStatus.PENDING:
            raise PreconditionError(f"Order {order_id} is {order.status.value}, not pending")

        intent = self.payment_client.create_payment_intent(order.total, order.id)
        # poprzednie referencje zostaja, klient mogl juz zaplacic starszy intent
        self.repo.update_order(
            order.id,
            {
                "payment_reference": intent["reference"],
                "payment_references": order.payment_references + [intent["reference"]],
            },
        )

        logger.info(f"Payment intent {intent['reference']} attached to order {order.id}")

        return {
            "order_id": order.id,
            "payment_reference": intent["reference"],
            "client_secret": intent["client_secret"],
            "amount": order.total,
            "currency": self.payment_client.currency,
        }

    def checkout(self, user_id: int, shipping_address: str) -> Tuple[OrderModel, Dict[str, Any]]:
        """
        Use Case: checkout = zamowienie + payment intent.
        Rownolegle checkouty tego samego usera blokuje lock w redisie,
        inaczej dwa requesty moglyby zamowic te same pozycje koszyka.
        """
        token = uuid.uuid4().hex
        if self.lock_service:
            try:
                acquired = self.lock_service.acquire_checkout_lock(user_id, token, self.lock_ttl)
            except RedisError as e:
                logger.error(f"Checkout lock for user {user_id} unavailable: {e}")
                raise ServiceUnavailableError("Checkout is temporarily unavailable") from e
            if not acquired:
                raise ConflictError("Checkout already in progress")

        try:
            order = self.create_order(user_id, shipping_address)
            #jesli bramka padnie zamowienie zostaje pending, intent mozna utworzyc ponownie
            payment = self.create_payment_intent(user_id, order.id)
            return self.repo.get_order(order.id), payment
        finally:
            if self.lock_service:
                self._release_lock(user_id, token)

    def _release_lock(self, user_id: int, token: str) -> None:
        try:
            self.lock_service.release_checkout_lock(user_id, token)
        except RedisError as e:
            # zamowienie juz zapisane, klucz i tak wygasnie po TTL
            logger.warning(f"Checkout lock release for user {user_id} failed: {e}")

    def apply_payment_event(self, order_id: int, payment_reference: str, succeeded: bool) -> OrderModel:
        """
        Webhook bramki. Powtorzone zdarzenie dla oplaconego zamowienia to no-op.
        Nieudana platnosc aktualnego intentu anuluje zamowienie, ktore jeszcze czeka (pending).
        Referencja musi byc jedna z wydanych dla zamowienia.
        """
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")

        if order.payment_references and payment_reference not in order.payment_references:
            raise ValidationError(
                f"Payment reference does not match order {order_id}"
            )

        if succeeded:
            if order.status in (OrderStatus.PAID, OrderStatus.COMPLETED):
                logger.info(f"Duplicate payment event for order {order_id}, ignoring")
                return order
            if order.status != OrderStatus.PENDING:
                raise PreconditionError(f"Order {order_id} is {order.status.value} and cannot be paid")
            new_status = OrderStatus.PAID
        else:
            if order.status != OrderStatus.PENDING:
                logger.info(f"Failed payment event for {order.status.value} order {order_id}, ignoring")
                return order
            if order.payment_reference and payment_reference != order.payment_reference:
                # nieudany stary intent, nowszy nadal moze zostac oplacony
                logger.info(f"Failed payment event for superseded intent {payment_reference}, ignoring")
                return order
            new_status = OrderStatus.CANCELLED

        references = order.payment_references
        if payment_reference not in references:
            references = references + [payment_reference]

        updated = self.repo.update_order(
            order_id,
            {
                "status": new_status,
                "payment_reference": payment_reference,
                "payment_references": references,
            },
        )
        logger.info(f"Order {order_id}: {order.status.value} -> {new_status.value}")
        return updated

    def update_status(self, order_id: int, status: OrderStatus) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")

        if order.status == status:
            return order

        if status not in _TRANSITIONS[order.status]:
            raise PreconditionError(
                f"Cannot change order {order_id} from {order.status.value} to {status.value}"
            )

        updated = self.repo.update_order(order_id, {"status": status})
        logger.info(f"Order {order_id}: {order.status.value} -> {status.value}")
        return updated

    def get_order(self, user_id: int, order_id: int) -> Dict[str, Any]:
        """
        Use Case: Pobranie zamowienia z pozycjami (Query).
        Admin widzi kazde zamowienie.
        """
        order = self._get_owned_order(user_id, order_id, allow_admin=True)
        return {
            **order.model_dump(),
            "items": self.repo.get_order_items(order.id),
        }

    def list_orders(self, user_id: int) -> List[OrderModel]:
        return self.repo.list_user_orders(user_id)

    def _get_owned_order(self, user_id: int, order_id: int, allow_admin: bool = False) -> OrderModel:
        order = self.repo.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found")

        if order.user_id != user_id and not (allow_admin and self._is_admin(user_id)):
            raise PermissionError("Not authorized to view this order")

        return order

    def _is_admin(self, user_id: int) -> bool:
        user = self.users.get_user(user_id)
        return user is not None and user.role == Role.ADMIN
