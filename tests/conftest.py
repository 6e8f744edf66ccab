"""
Pytest configuration — both apps are built around an injected store and a
virtual-time scheduler so kitchen progression runs without real sleeps.
"""

import pytest
from fastapi.testclient import TestClient

from pizza_demo.hateoas.main import create_app as create_hateoas_app
from pizza_demo.rest.main import create_app as create_rest_app
from pizza_demo.shared.config import Settings
from pizza_demo.shared.orders import OrderStatus, OrderStore
from pizza_demo.shared.progression import OrderProgression
from pizza_demo.shared.scheduling import ManualScheduler


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def store() -> OrderStore:
    return OrderStore()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def progression(store, scheduler) -> OrderProgression:
    return OrderProgression(store, scheduler)


@pytest.fixture
def rest_app(settings, store, scheduler):
    return create_rest_app(settings, store, scheduler)


@pytest.fixture
def hateoas_app(settings, store, scheduler):
    return create_hateoas_app(settings, store, scheduler)


@pytest.fixture
def rest_client(rest_app) -> TestClient:
    return TestClient(rest_app)


@pytest.fixture
def hateoas_client(hateoas_app) -> TestClient:
    return TestClient(hateoas_app)


@pytest.fixture
def move_to(store):
    """Walk an order to ``status`` through legal transitions only."""
    kitchen = [OrderStatus.PREPARING, OrderStatus.BAKING, OrderStatus.READY]

    def move(order_id: str, status: OrderStatus) -> None:
        if status == OrderStatus.CANCELLED:
            store.cancel(order_id)
            return
        if status == OrderStatus.PENDING:
            return
        for step in kitchen[: kitchen.index(status) + 1]:
            store.set_status(order_id, step)

    return move
