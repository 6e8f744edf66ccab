"""
Order Store — the in-memory owner of every order record.

Status lifecycle:

    pending → preparing → baking → ready   (→ delivered, never reached here)
       └─────────┴──────────┴──→ cancelled  (absorbing)

Orders live for the whole process lifetime; nothing is ever deleted.
All mutations go through the store lock so the timer's check-then-set stays
atomic even if handlers end up running on worker threads.
"""

import logging
import threading
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from .errors import IllegalTransitionError, NotFoundError, OrderValidationError
from .menu import Menu

logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    BAKING = "baking"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_final(self) -> bool:
        return self in FINAL_STATUSES

    @property
    def is_cancellable(self) -> bool:
        return self not in FINAL_STATUSES


FINAL_STATUSES = frozenset(
    {OrderStatus.READY, OrderStatus.DELIVERED, OrderStatus.CANCELLED}
)

# Legal moves: the kitchen chain plus the cancel escape. Final statuses have none.
TRANSITIONS = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.BAKING, OrderStatus.CANCELLED}),
    OrderStatus.BAKING: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
    OrderStatus.READY: frozenset(),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in TRANSITIONS[current]


class Order:
    def __init__(
        self,
        order_id: str,
        pizza_id: int,
        pizza_name: str,
        quantity: int,
        created_at: datetime,
    ) -> None:
        self.order_id = order_id
        self.pizza_id = pizza_id
        # copied at order time so menu edits never rewrite history
        self.pizza_name = pizza_name
        self.quantity = quantity
        self.status = OrderStatus.PENDING
        self.created_at = created_at


def _whole_number(value: object) -> int | None:
    """Ints and integral floats (JSON ``2.0``); anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class OrderStore:
    def __init__(self, menu: Menu | None = None) -> None:
        self.menu = menu or Menu()
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()

    def create(self, pizza_id: object, quantity: object) -> Order:
        """
        Validate and record a new pending order.

        Raises OrderValidationError when pizzaId is missing (or 0) or quantity
        is not a positive whole number, NotFoundError when pizzaId names no
        pizza on the menu (negative ids, strings...). Nothing is stored when
        either is raised.
        """
        count = _whole_number(quantity)
        if not pizza_id or count is None or count <= 0:
            raise OrderValidationError("pizzaId and quantity are required")

        pizza_key = _whole_number(pizza_id)
        pizza = self.menu.find(pizza_key) if pizza_key is not None else None
        if pizza is None:
            raise NotFoundError("Pizza not found")

        order = Order(
            order_id=str(uuid4()),
            pizza_id=pizza.id,
            pizza_name=pizza.name,
            quantity=count,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._orders[order.order_id] = order
        logger.info("Order %s created: %d x %s", order.order_id, count, pizza.name)
        return order

    def get(self, order_id: str) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def set_status(self, order_id: str, status: OrderStatus) -> Order:
        """Apply one legal transition; IllegalTransitionError otherwise."""
        with self._lock:
            order = self.get(order_id)
            if not can_transition(order.status, status):
                raise IllegalTransitionError(
                    f"Cannot move order from {order.status.value} to {status.value}"
                )
            order.status = status
        return order

    def advance(self, order_id: str, status: OrderStatus) -> bool:
        """
        Move an order forward along the kitchen chain.

        No-op (returns False) when the order is unknown, cancelled, or not one
        step before ``status``. Check and set happen under one lock hold.
        """
        with self._lock:
            order = self._orders.get(order_id)
            if order is None or order.status == OrderStatus.CANCELLED:
                return False
            if status == OrderStatus.CANCELLED or not can_transition(order.status, status):
                return False
            order.status = status
            return True

    def cancel(self, order_id: str) -> Order:
        """
        Cancel an order still in the kitchen.

        Raises NotFoundError for an unknown id and IllegalTransitionError once
        the order is ready or delivered. Cancelling twice is accepted.
        """
        with self._lock:
            order = self.get(order_id)
            if order.status == OrderStatus.CANCELLED:
                return order
            if not can_transition(order.status, OrderStatus.CANCELLED):
                raise IllegalTransitionError("Order can no longer be cancelled")
            order.status = OrderStatus.CANCELLED
        logger.info("Order %s cancelled", order_id)
        return order

    def __len__(self) -> int:
        return len(self._orders)
