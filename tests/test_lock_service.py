"""Tests for the Redis checkout lock; the Redis client is mocked."""

from unittest.mock import MagicMock

import pytest
import redis

from ecorevive.services.lock_service import LockService


def test_acquire_uses_set_nx_with_ttl():
    redis_client = MagicMock()
    redis_client.set.return_value = True
    locks = LockService(client=redis_client)

    assert locks.acquire_checkout_lock(5, "tok", ttl=30) is True
    redis_client.set.assert_called_once_with(name="checkout:5:lock", value="tok", nx=True, ex=30)


def test_acquire_fails_when_key_exists():
    redis_client = MagicMock()
    redis_client.set.return_value = None
    assert LockService(client=redis_client).acquire_checkout_lock(5, "tok", ttl=30) is False


def test_release_is_compare_and_delete():
    redis_client = MagicMock()
    redis_client.eval.return_value = 0
    locks = LockService(client=redis_client)

    assert locks.release_checkout_lock(5, "not-mine") is False
    args = redis_client.eval.call_args.args
    assert args[1:] == (1, "checkout:5:lock", "not-mine")


def test_acquire_retries_once_then_gives_up():
    redis_client = MagicMock()
    redis_client.set.side_effect = [redis.ConnectionError("reset"), True]
    assert LockService(client=redis_client).acquire_checkout_lock(5, "tok", ttl=30) is True

    redis_client.set.side_effect = redis.ConnectionError("down")
    redis_client.set.reset_mock()
    with pytest.raises(redis.ConnectionError):
        LockService(client=redis_client).acquire_checkout_lock(5, "tok", ttl=30)
    assert redis_client.set.call_count == 2
