"""App factories: routes are registered and owned clients are released."""

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

import cloudeats.api as api
from cloudeats.api import create_menu_app, create_order_app, create_user_app


def _paths(app):
    return {route.path for route in app.routes}


class ClosableClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_order_app_without_injected_clients_registers_routes():
    paths = _paths(create_order_app())

    assert {
        "/health",
        "/api/cart/{user_id}",
        "/api/cart/{user_id}/items",
        "/api/cart/{user_id}/items/{item_id}",
        "/api/orders",
        "/api/orders/user/{user_id}",
        "/api/orders/{order_id}",
        "/api/orders/{order_id}/status",
    } <= paths


def test_user_app_registers_routes():
    paths = _paths(create_user_app())

    assert {"/health", "/api/auth/register", "/api/auth/login", "/api/users/{user_id}"} <= paths


def test_menu_app_registers_routes():
    assert {"/health", "/api/menu/{item_id}/ratings"} <= _paths(create_menu_app())


def test_failed_mongo_startup_closes_redis(monkeypatch):
    redis_client = ClosableClient()
    mongo_client = ClosableClient()

    def mongo_down(client):
        raise ServerSelectionTimeoutError("mongodb:27017 unreachable")

    monkeypatch.setattr(api, "create_redis", lambda url: redis_client)
    monkeypatch.setattr(api, "wait_for_redis", lambda client: None)
    monkeypatch.setattr(api, "create_mongo", lambda url: mongo_client)
    monkeypatch.setattr(api, "wait_for_mongo", mongo_down)

    with pytest.raises(ServerSelectionTimeoutError):
        with TestClient(create_order_app()):
            pass

    assert redis_client.closed
    assert mongo_client.closed
