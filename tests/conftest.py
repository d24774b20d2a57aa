"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from collection_services.app.core.config import SERVICES
from collection_services.app.core.store import RecordStore
from collection_services.app.main import create_app


@pytest.fixture
def make_client():
    """Factory building a test client for a fresh instance of a service."""
    def _make(name, store=None):
        return TestClient(create_app(SERVICES[name], store=store))
    return _make


@pytest.fixture
def users_client(make_client):
    return make_client("users")


@pytest.fixture
def products_client(make_client):
    return make_client("products")


@pytest.fixture
def orders_client(make_client):
    return make_client("orders")


@pytest.fixture
def store():
    return RecordStore()
