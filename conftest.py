import pytest
from httpx import AsyncClient, ASGITransport

from carshare.main import app
from carshare.core import redis as redis_module
from carshare.core.config import settings
from carshare.schemas.catalog import Car, Catalog, Company
from carshare.services.catalog import get_catalog


class FakeRedis:
    """In-memory stand-in for the handful of Redis commands the service issues"""

    def __init__(self):
        self.store = {}
        self.expiry = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        if isinstance(value, str):
            value = value.encode()
        self.store[key] = value
        self.expiry[key] = ex

    async def incr(self, key):
        value = int(self.store.get(key, b"0")) + 1
        self.store[key] = str(value).encode()
        return value

    async def ping(self):
        return True

    async def close(self):
        pass


@pytest.fixture
def economy_car():
    return Car(
        id="economy-test",
        name="EconoTest",
        type="economy",
        transmission="manual",
        fuel_type="petrol-diesel",
        company="gocar",
        pricing={"hour": 8, "day": 45, "week": 270},
    )


@pytest.fixture
def premium_auto_car():
    return Car(
        id="premium-test",
        name="PremiumTest",
        type="premium",
        transmission="automatic",
        fuel_type="petrol-diesel",
        company="driveyou",
        pricing={"hour": 12, "day": 65, "week": 350},
        free_km_policy={"hourly": 20, "daily": 120},
    )


@pytest.fixture
def no_weekly_rate_car():
    return Car(
        id="standard-test",
        name="StandardTest",
        type="standard",
        transmission="manual",
        fuel_type="petrol-diesel",
        company="yuko",
        pricing={"hour": 10, "day": 55},
    )


@pytest.fixture
def compact_extra_km_car():
    return Car(
        id="compact-test",
        name="CompactTest",
        type="compact",
        transmission="manual",
        fuel_type="electric",
        company="gocar",
        pricing={"hour": 7, "day": 40, "week": 240},
        price_per_extra_km=0.3,
    )


@pytest.fixture
def gocar():
    return Company(
        id="gocar",
        name="GoCar",
        default_price_per_extra_km=0.25,
        free_km_policy={"standard": 50},
    )


@pytest.fixture
def driveyou():
    return Company(
        id="driveyou",
        name="DriveYou",
        default_price_per_extra_km=0.25,
        free_km_policy={"hourly": 15, "daily": 50, "weekly": 300},
    )


@pytest.fixture
def yuko():
    return Company(
        id="yuko",
        name="Yuko",
        default_price_per_extra_km=0.25,
        free_km_policy={"daily": 50, "weekly": 300},
    )


@pytest.fixture
def test_catalog(economy_car, premium_auto_car, no_weekly_rate_car, compact_extra_km_car, gocar, driveyou, yuko):
    return Catalog(
        companies=[gocar, driveyou, yuko],
        cars=[economy_car, premium_auto_car, no_weekly_rate_car, compact_extra_km_car],
    )


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_module, "redis", fake)
    return fake


@pytest.fixture
async def test_client(test_catalog):
    app.dependency_overrides[get_catalog] = lambda: test_catalog
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_quote_data():
    return {
        "car_id": "economy-test",
        "duration_hours": 1,
        "distance_km": 70,
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "catalog: marks tests related to the car catalog"
    )
    config.addinivalue_line(
        "markers", "rate_limit: marks tests related to rate limiting"
    )
