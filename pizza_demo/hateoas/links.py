"""
Link Policy Engine

Decides, for a route context and (optionally) an order, which hypermedia
relations the response may carry and where they point. The server alone
knows which actions are legal right now; the client only matches ``rel``.

  context            relations (in order)
  ─────────────────  ──────────────────────────────────
  ENTRY              menu
  MENU               self(menu)  order  start
  ORDER_CREATED      self(order)  track  cancel  menu
  NOT_FOUND          menu
  VALIDATION_FAILED  menu
  TRACK              self(track)  menu  [cancel]   ← only while cancellable
  CANCELLED          menu  order
  CANCEL_REJECTED    track  menu

Every href is absolute; the base URL is resolved per request.
"""

import logging
from enum import Enum

from fastapi import Request
from pydantic import BaseModel

from ..shared.config import Settings
from ..shared.orders import Order

logger = logging.getLogger(__name__)


class Rel(str, Enum):
    START = "start"
    MENU = "menu"
    ORDER = "order"
    SELF = "self"
    TRACK = "track"
    CANCEL = "cancel"


class Link(BaseModel):
    rel: Rel
    href: str
    method: str = "GET"
    description: str


class RouteContext(str, Enum):
    ENTRY = "entry"
    MENU = "menu"
    ORDER_CREATED = "order_created"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    TRACK = "track"
    CANCELLED = "cancelled"
    CANCEL_REJECTED = "cancel_rejected"


# Contexts whose links point at one specific order
ORDER_CONTEXTS = frozenset(
    {
        RouteContext.ORDER_CREATED,
        RouteContext.TRACK,
        RouteContext.CANCEL_REJECTED,
    }
)


def resolve_base_url(request: Request, settings: Settings) -> str:
    """
    Base URL (scheme + host) for the links of this response.

    Deployed (APP_ENV=production, or any Host other than localhost:<port>):
    reuse the caller's scheme and host, honouring X-Forwarded-Proto behind a
    proxy. Local: http://localhost:<port>, also used when the request
    carries no host at all.
    """
    local_host = f"localhost:{settings.hateoas_port}"
    host = request.headers.get("host") or request.url.netloc
    if not host:
        return f"http://{local_host}"
    deployed = settings.is_production or host != local_host
    logger.debug(
        "Environment: APP_ENV=%s host=%s deployed=%s", settings.app_env, host, deployed
    )
    if deployed:
        scheme = request.headers.get("x-forwarded-proto") or request.url.scheme or "https"
        return f"{scheme}://{host}"
    return f"http://{local_host}"


class _LinkFactory:
    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def make(self, rel: Rel, path: str, method: str, description: str) -> Link:
        return Link(rel=rel, href=self.base_url + path, method=method, description=description)

    def start(self) -> Link:
        return self.make(Rel.START, "/v1/start", "GET", "Back to the home page")

    def menu(self, rel: Rel = Rel.MENU, description: str = "Back to the menu") -> Link:
        return self.make(rel, "/v1/menu", "GET", description)

    def order(self, rel: Rel = Rel.ORDER, description: str = "Place a new order") -> Link:
        return self.make(rel, "/v1/order", "POST", description)

    def track(self, order: Order, rel: Rel = Rel.TRACK, description: str = "Track this order") -> Link:
        return self.make(rel, f"/v1/track/{order.order_id}", "GET", description)

    def cancel(self, order: Order) -> Link:
        return self.make(
            Rel.CANCEL, f"/v1/order/{order.order_id}/cancel", "DELETE", "Cancel this order"
        )


def links_for(context: RouteContext, base_url: str, order: Order | None = None) -> list[Link]:
    """Ordered link set for ``context``; ``order`` is required for order-bound contexts."""
    if context in ORDER_CONTEXTS and order is None:
        raise ValueError(f"{context.value} links need an order")

    f = _LinkFactory(base_url)

    if context == RouteContext.ENTRY:
        return [f.menu(description="Show the pizza menu")]

    if context == RouteContext.MENU:
        return [
            f.menu(Rel.SELF, "Reload the menu"),
            f.order(description="Order a pizza"),
            f.start(),
        ]

    if context == RouteContext.ORDER_CREATED:
        return [
            f.order(Rel.SELF, "Place a new order"),
            f.track(order),
            f.cancel(order),
            f.menu(),
        ]

    if context in (RouteContext.NOT_FOUND, RouteContext.VALIDATION_FAILED):
        return [f.menu()]

    if context == RouteContext.TRACK:
        links = [
            f.track(order, Rel.SELF, "Refresh the tracking information"),
            f.menu(),
        ]
        if order.status.is_cancellable:
            links.append(f.cancel(order))
        return links

    if context == RouteContext.CANCELLED:
        return [f.menu(), f.order()]

    if context == RouteContext.CANCEL_REJECTED:
        return [f.track(order), f.menu()]

    raise ValueError(f"Unknown route context: {context}")
