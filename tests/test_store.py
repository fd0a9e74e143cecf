"""Tests for the in-memory entity store."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as SchemaError

from ecorevive.data.store import EntityStore
from ecorevive.repos.user_repo import UserRepo


class TestTable:
    def test_ids_start_at_one_and_increase(self, store):
        a = store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 1})
        b = store.cart_items.create({"user_id": 1, "product_id": 2, "quantity": 1})
        assert (a.id, b.id) == (1, 2)

    def test_ids_are_never_reused(self, store):
        store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 1})
        second = store.cart_items.create({"user_id": 1, "product_id": 2, "quantity": 1})
        assert store.cart_items.delete(second.id) is True

        third = store.cart_items.create({"user_id": 1, "product_id": 3, "quantity": 1})
        assert third.id == 3

    def test_counters_are_per_table(self, store, make_product):
        make_product()
        item = store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 1})
        assert item.id == 1

    def test_reads_return_copies(self, make_product, store):
        product = make_product(price=Decimal("10.00"))
        product.price = Decimal("99.00")
        fetched = store.products.get(product.id)
        fetched.images.append("/uploads/x.png")

        again = store.products.get(product.id)
        assert again.price == Decimal("10.00")
        assert again.images == []

    def test_update_merges_partial_and_keeps_id(self, store):
        item = store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 1})
        updated = store.cart_items.update(item.id, {"quantity": 4, "id": 99})
        assert updated.id == item.id
        assert updated.quantity == 4
        assert store.cart_items.get(99) is None

    def test_update_and_delete_unknown_id(self, store):
        assert store.orders.update(42, {"status": "paid"}) is None
        assert store.orders.delete(42) is False

    def test_invalid_row_does_not_consume_id(self, store):
        with pytest.raises(SchemaError):
            store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 0})
        item = store.cart_items.create({"user_id": 1, "product_id": 1, "quantity": 1})
        assert item.id == 1

    def test_all_preserves_insertion_order(self, make_product, store):
        for title in ("a", "b", "c"):
            make_product(title=title)
        assert [p.title for p in store.products.all()] == ["a", "b", "c"]

    def test_stores_are_isolated(self, make_product):
        make_product()
        assert len(EntityStore().products) == 0


class TestUserLookups:
    def test_username_and_email_lookup_ignore_case(self, store, buyer):
        repo = UserRepo(store)
        assert repo.get_by_username("BOB").id == buyer.id
        assert repo.get_by_email("Bob@Example.COM").id == buyer.id
        assert repo.get_by_username("nobody") is None


def test_product_price_must_be_whole_cents(store):
    with pytest.raises(SchemaError):
        store.products.create(
            {
                "title": "Lamp", "description": "d", "price": Decimal("1.005"),
                "category": "Home Decor", "condition": "Good", "location": "x", "seller_id": 1,
            }
        )
    assert len(store.products) == 0
