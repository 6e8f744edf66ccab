"""Tests for the kitchen progression timer and the schedulers behind it."""

import asyncio

import pytest

from pizza_demo.shared.orders import OrderStatus
from pizza_demo.shared.progression import OrderProgression
from pizza_demo.shared.scheduling import AsyncioScheduler, ManualScheduler


def test_three_transitions_are_scheduled(store, scheduler, progression):
    order = store.create(1, 1)
    progression.start(order.order_id)

    assert scheduler.pending == 3


def test_full_progression(store, scheduler, progression):
    order = store.create(1, 1)
    progression.start(order.order_id)

    scheduler.advance(9)
    assert order.status == OrderStatus.PENDING
    scheduler.advance(1)
    assert order.status == OrderStatus.PREPARING
    scheduler.advance(10)
    assert order.status == OrderStatus.BAKING
    scheduler.advance(10)
    assert order.status == OrderStatus.READY

    scheduler.advance(60)
    assert order.status == OrderStatus.READY
    assert scheduler.pending == 0


def test_cancellation_wins_over_pending_transitions(store, scheduler, progression):
    order = store.create(1, 1)
    progression.start(order.order_id)

    scheduler.advance(15)
    assert order.status == OrderStatus.PREPARING
    store.cancel(order.order_id)

    scheduler.advance(30)
    assert order.status == OrderStatus.CANCELLED


def test_transitions_are_independent_of_each_other(store, scheduler, progression):
    order = store.create(1, 1)
    progression.start(order.order_id)

    # jump straight past every deadline: all three fire in due order
    assert scheduler.advance(100) == 3
    assert order.status == OrderStatus.READY


def test_delays_come_from_settings(store, scheduler, settings):
    settings = settings.model_copy(
        update={"preparing_delay": 1, "baking_delay": 2, "ready_delay": 3}
    )
    progression = OrderProgression.from_settings(store, scheduler, settings)
    order = store.create(2, 1)
    progression.start(order.order_id)

    scheduler.advance(3)
    assert order.status == OrderStatus.READY


def test_manual_scheduler_skips_cancelled_handles():
    scheduler = ManualScheduler()
    fired = []
    handle = scheduler.call_later(1, lambda: fired.append("a"))
    scheduler.call_later(2, lambda: fired.append("b"))
    handle.cancel()

    scheduler.advance(5)

    assert fired == ["b"]
    assert scheduler.now == 5


@pytest.mark.anyio
async def test_asyncio_scheduler_drives_real_progression(store):
    progression = OrderProgression(
        store, AsyncioScheduler(), preparing_delay=0.01, baking_delay=0.02, ready_delay=0.03
    )
    order = store.create(3, 1)
    progression.start(order.order_id)

    await asyncio.sleep(0.2)

    assert order.status == OrderStatus.READY
