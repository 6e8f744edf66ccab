"""Tests for per-app wiring of the store and the progression timer."""

import pytest
from fastapi.testclient import TestClient

from pizza_demo.hateoas.main import create_app as create_hateoas_app
from pizza_demo.rest.main import create_app as create_rest_app
from pizza_demo.shared.orders import OrderStore
from pizza_demo.shared.scheduling import AsyncioScheduler

FACTORIES = [create_rest_app, create_hateoas_app]


@pytest.mark.parametrize("factory", FACTORIES)
def test_injected_empty_store_is_kept(factory, settings, store, scheduler):
    assert len(store) == 0

    app = factory(settings, store, scheduler)

    assert app.state.store is store
    assert app.state.progression.store is store
    assert app.state.progression.scheduler is scheduler


@pytest.mark.parametrize("factory", FACTORIES)
def test_orders_land_in_the_injected_store(factory, settings, store, scheduler):
    client = TestClient(factory(settings, store, scheduler))

    resp = client.post("/v1/order", json={"pizzaId": 4, "quantity": 1})

    assert resp.status_code == 201
    assert len(store) == 1
    assert scheduler.pending == 3


@pytest.mark.parametrize("factory", FACTORIES)
def test_defaults_when_nothing_is_injected(factory, settings):
    app = factory(settings)

    assert isinstance(app.state.store, OrderStore)
    assert isinstance(app.state.progression.scheduler, AsyncioScheduler)


def test_apps_do_not_share_default_stores(settings):
    assert create_rest_app(settings).state.store is not create_hateoas_app(settings).state.store
