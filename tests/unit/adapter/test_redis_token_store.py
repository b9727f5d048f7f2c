"""Unit tests for RedisTokenStore with fakeredis.

fakeredis emulates Redis in memory, including key TTLs and SET NX.
"""
from datetime import timedelta

import fakeredis.aioredis
import pytest
import pytest_asyncio

from src.adapter.services.redis_token_store import RedisTokenStore


@pytest_asyncio.fixture
async def redis_client():
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def store(redis_client):
    return RedisTokenStore(redis_client, cooldown_seconds=60)


@pytest.mark.asyncio
async def test_put_and_get(store, redis_client):
    await store.put("password_reset:token:abc", "user@example.com", timedelta(minutes=10))

    assert await store.get("password_reset:token:abc") == "user@example.com"
    ttl = await redis_client.ttl("password_reset:token:abc")
    assert 0 < ttl <= 600


@pytest.mark.asyncio
async def test_get_missing_key(store):
    assert await store.get("password_reset:token:missing") is None


@pytest.mark.asyncio
async def test_delete_removes_key(store):
    await store.put("key", "value", timedelta(minutes=1))

    await store.delete("key")

    assert await store.get("key") is None


@pytest.mark.asyncio
async def test_delete_missing_key_is_noop(store):
    await store.delete("never-written")


@pytest.mark.asyncio
async def test_take_removes_key_once(store):
    await store.put("password_reset:token:abc", "user@example.com", timedelta(minutes=10))

    assert await store.take("password_reset:token:abc") is True
    assert await store.take("password_reset:token:abc") is False
    assert await store.get("password_reset:token:abc") is None


@pytest.mark.asyncio
async def test_bytes_values_are_decoded():
    client = fakeredis.aioredis.FakeRedis()
    store = RedisTokenStore(client)

    await store.put("key", "value", timedelta(minutes=1))

    assert await store.get("key") == "value"
    await client.flushall()
    await client.aclose()


@pytest.mark.asyncio
async def test_cooldown_absent(store):
    assert await store.get_cooldown("user@example.com") is None


@pytest.mark.asyncio
async def test_set_cooldown_then_remaining(store, redis_client):
    assert await store.set_cooldown("user@example.com") is True

    remaining = await store.get_cooldown("user@example.com")
    assert 0 < remaining <= 60
    assert await redis_client.exists("password_reset:cooldown:user@example.com") == 1


@pytest.mark.asyncio
async def test_set_cooldown_is_set_if_absent(store):
    assert await store.set_cooldown("user@example.com") is True
    assert await store.set_cooldown("user@example.com") is False
    assert await store.set_cooldown("other@example.com") is True


@pytest.mark.asyncio
async def test_cooldown_without_expiry_is_ignored(store, redis_client):
    await redis_client.set("password_reset:cooldown:user@example.com", "x")

    assert await store.get_cooldown("user@example.com") is None
