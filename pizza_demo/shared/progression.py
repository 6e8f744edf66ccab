"""
Status Progression Timer — simulates the kitchen.

Three independent transitions are scheduled from the creation instant:

    +preparing_delay  pending   → preparing
    +baking_delay     preparing → baking
    +ready_delay      baking    → ready

They are not chained: each one re-reads the order when it fires and does
nothing if the order was cancelled meanwhile. Cancellation never unschedules
them; it only turns them into no-ops.
"""

import logging

from .config import Settings
from .orders import OrderStatus, OrderStore
from .scheduling import ScheduledHandle, Scheduler

logger = logging.getLogger(__name__)


class OrderProgression:
    def __init__(
        self,
        store: OrderStore,
        scheduler: Scheduler,
        preparing_delay: float = 10.0,
        baking_delay: float = 20.0,
        ready_delay: float = 30.0,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.steps = (
            (preparing_delay, OrderStatus.PREPARING),
            (baking_delay, OrderStatus.BAKING),
            (ready_delay, OrderStatus.READY),
        )

    @classmethod
    def from_settings(
        cls, store: OrderStore, scheduler: Scheduler, settings: Settings
    ) -> "OrderProgression":
        return cls(
            store,
            scheduler,
            preparing_delay=settings.preparing_delay,
            baking_delay=settings.baking_delay,
            ready_delay=settings.ready_delay,
        )

    def start(self, order_id: str) -> list[ScheduledHandle]:
        return [
            self.scheduler.call_later(delay, self._transition(order_id, status))
            for delay, status in self.steps
        ]

    def _transition(self, order_id: str, status: OrderStatus):
        def fire() -> None:
            if self.store.advance(order_id, status):
                logger.info("Order %s is now %s", order_id, status.value)
            else:
                logger.info(
                    "Order %s: skipped transition to %s", order_id, status.value
                )

        return fire
