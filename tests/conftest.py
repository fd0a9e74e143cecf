"""Shared fixtures: a fresh in-memory store per test plus fake collaborators."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ecorevive.api import create_app
from ecorevive.data.store import EntityStore
from ecorevive.domain.enums import Category, Condition, Role
from ecorevive.domain.errors import PaymentError
from ecorevive.domain.schemas import UserCreate
from ecorevive.services.user_service import UserService


class FakePaymentClient:
    """Stands in for the payment gateway; records every intent request."""

    currency = "usd"

    def __init__(self):
        self.calls = []
        self.fail = False

    def create_payment_intent(self, amount, order_id):
        if self.fail:
            raise PaymentError("Payment provider error: gateway down")
        self.calls.append((amount, order_id))
        n = len(self.calls)
        return {"reference": f"pi_{n}", "client_secret": f"pi_{n}_secret_abc"}


class FakeLockService:
    """Single-process replacement for the Redis checkout lock."""

    def __init__(self):
        self.held = {}
        self.released = []

    def acquire_checkout_lock(self, user_id, token, ttl):
        if user_id in self.held:
            return False
        self.held[user_id] = token
        return True

    def release_checkout_lock(self, user_id, token):
        self.released.append(user_id)
        if self.held.get(user_id) == token:
            del self.held[user_id]
            return True
        return False


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def payment_client():
    return FakePaymentClient()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def make_user(store):
    users = UserService(store)

    def _make(username, role=Role.BUYER, **overrides):
        fields = {
            "username": username,
            "password": "secret123",
            "email": f"{username}@example.com",
            "full_name": username.title(),
            "role": role if role != Role.ADMIN else Role.BUYER,
        }
        fields.update(overrides)
        user = users.register(UserCreate(**fields))
        if role == Role.ADMIN:
            user = users.repo.update_user(user.id, {"role": Role.ADMIN})
        return user

    return _make


@pytest.fixture
def seller(make_user):
    return make_user("sally", role=Role.SELLER)


@pytest.fixture
def buyer(make_user):
    return make_user("bob")


@pytest.fixture
def make_product(store, seller):
    def _make(**overrides):
        fields = {
            "title": "Upcycled Lamp",
            "description": "Lamp made from an old bottle",
            "price": Decimal("10.00"),
            "category": Category.HOME_DECOR,
            "condition": Condition.GOOD,
            "location": "Portland, OR",
            "seller_id": seller.id,
        }
        fields.update(overrides)
        return store.products.create(fields)

    return _make


@pytest.fixture
def client(store, payment_client, lock_service):
    app = create_app(store=store, payment_client=payment_client, lock_service=lock_service)
    with TestClient(app) as c:
        yield c
