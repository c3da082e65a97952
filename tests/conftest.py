"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from promocode_api.core.config import Settings
from promocode_api.db.store import DataStore


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_fixtures=True, api_prefix="/api/v1", promo_code_validity_days=30)


@pytest.fixture
def store() -> DataStore:
    return DataStore.seeded()


@pytest.fixture
def client(settings: Settings, store: DataStore) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))
