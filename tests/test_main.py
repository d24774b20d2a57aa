"""Tests for the application factory."""

from fastapi.testclient import TestClient

from collection_services.app.core.config import SERVICES
from collection_services.app.core.store import RecordStore
from collection_services.app.main import create_app, orders_app, products_app, users_app


def test_startup_line_announces_port(capsys):
    app = create_app(SERVICES["users"], port=3000)
    with TestClient(app):
        pass

    out = capsys.readouterr().out
    assert out.strip().splitlines() == ["User Service is running on port 3000"]


def test_startup_line_uses_configured_port(capsys):
    with TestClient(create_app(SERVICES["orders"], port=9002)):
        pass

    assert "Order Service is running on port 9002" in capsys.readouterr().out


def test_app_state():
    store = RecordStore()
    app = create_app(SERVICES["products"], store=store)

    assert app.state.store is store
    assert app.state.definition is SERVICES["products"]
    assert app.title == "Product Service"


def test_module_level_apps_are_separate():
    assert users_app.state.definition.name == "users"
    assert products_app.state.definition.name == "products"
    assert orders_app.state.definition.name == "orders"
    assert users_app.state.store is not products_app.state.store
    assert products_app.state.store is not orders_app.state.store


def test_openapi_lists_collection_routes():
    schema = TestClient(create_app(SERVICES["users"])).get("/openapi.json").json()

    assert "post" in schema["paths"]["/register"]
    assert "get" in schema["paths"]["/users"]
