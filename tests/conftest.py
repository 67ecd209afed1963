"""
Shared fixtures.

Ranking configuration is required by Settings, so the environment is primed
before any recommender module is imported.
"""

import os

os.environ.setdefault("MINIMUM_UTILITY", "0")
os.environ.setdefault("RESULT_LIMIT", "3")
os.environ.pop("REDIS_URL", None)
os.environ.pop("DEMO_CATALOG_PATH", None)

import pytest

from recommender.core.config import get_settings
from recommender.domain.models.product import Product


@pytest.fixture
def make_product():
    """Factory for products that pass every hard filter of an empty query."""
    def _make(**overrides):
        fields = {
            "name": "Plain Plate",
            "type": "plate",
            "brand": "Acme",
            "description": "flat dish",
            "price": 10.0,
            "stock": 5,
            "rating": 3.0,
            "shipping_price": 0.0,
            "shipping_time": 2,
        }
        fields.update(overrides)
        return Product(**fields)
    return _make


@pytest.fixture
def cafe_mug(make_product):
    return make_product(
        name="Café Mug",
        type="mug",
        brand="Acme",
        description="ceramic cup",
        price=10,
        stock=2,
        rating=4.5,
        shipping_price=0,
        shipping_time=1,
    )


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the settings cache around a test that changes the environment."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()


class FakeRedis:
    """Dict-backed stand-in for the redis.asyncio calls the service makes."""

    def __init__(self, fail: bool = False):
        self.store = {}
        self.fail = fail
        self.set_calls = 0

    async def get(self, key):
        if self.fail:
            raise ConnectionError("redis down")
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        if self.fail:
            raise ConnectionError("redis down")
        self.set_calls += 1
        self.store[key] = value

    async def ping(self):
        if self.fail:
            raise ConnectionError("redis down")
        return True


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def broken_redis():
    return FakeRedis(fail=True)
