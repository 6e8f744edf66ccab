"""
Order commands shared by both apps.

Both HTTP surfaces run exactly the same validation and mutation; they only
differ in how they shape the response.
"""

from typing import Any

from pydantic import BaseModel

from .orders import Order, OrderStore
from .progression import OrderProgression


class PlaceOrderRequest(BaseModel):
    # left untyped: OrderStore.create decides between 400 and 404
    pizzaId: Any = None
    quantity: Any = None


def place_order(
    store: OrderStore,
    progression: OrderProgression,
    req: PlaceOrderRequest,
) -> Order:
    """
    Place an order:
    1. validate and store it as pending
    2. schedule the kitchen progression
    """
    order = store.create(req.pizzaId, req.quantity)
    progression.start(order.order_id)
    return order


def cancel_order(store: OrderStore, order_id: str) -> Order:
    return store.cancel(order_id)


def track_order(store: OrderStore, order_id: str) -> Order:
    return store.get(order_id)
