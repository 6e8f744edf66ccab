"""
HATEOAS API — FastAPI entry point (port 3001)

Only ``GET /v1/start`` is advertised. Every other route is reached through
the links returned in each response:

  ┌────────┐  links  ┌──────┐  links  ┌───────┐  links  ┌───────┐
  │ start  │────────▶│ menu │────────▶│ order │────────▶│ track │──┐
  └────────┘         └──────┘         └───────┘         └───────┘  │ cancel
                                                                    ▼
                                                 DELETE /v1/order/{id}/cancel

Error responses carry links too (at least ``menu``) so the client is never
stuck at a dead end.
"""

import logging

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..shared import commands
from ..shared.app_state import (
    configure_logging,
    get_progression,
    get_settings,
    get_store,
    init_state,
)
from ..shared.commands import PlaceOrderRequest
from ..shared.config import Settings
from ..shared.errors import IllegalTransitionError, NotFoundError, PizzaOrderError
from ..shared.orders import OrderStore
from ..shared.progression import OrderProgression
from ..shared.scheduling import Scheduler
from .links import Link, RouteContext, links_for, resolve_base_url

logger = logging.getLogger(__name__)


def base_url(request: Request, settings: Settings = Depends(get_settings)) -> str:
    return resolve_base_url(request, settings)


def _dump(links: list[Link]) -> list[dict]:
    return [link.model_dump(mode="json") for link in links]


def _error(status_code: int, message: str, links: list[Link]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message, "links": _dump(links)}
    )


def create_app(
    settings: Settings | None = None,
    store: OrderStore | None = None,
    scheduler: Scheduler | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Pizza API - HATEOAS")
    init_state(app, settings, store, scheduler)

    # ── Error Handlers ───────────────────────────────

    @app.exception_handler(PizzaOrderError)
    async def pizza_order_error(request: Request, exc: PizzaOrderError):
        links = links_for(RouteContext.NOT_FOUND, resolve_base_url(request, settings))
        return _error(exc.status_code, exc.message, links)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        links = links_for(
            RouteContext.VALIDATION_FAILED, resolve_base_url(request, settings)
        )
        return _error(400, "pizzaId and quantity are required", links)

    # ── Entry Point (the only URL a client may hardcode) ──

    @app.get("/v1/start")
    async def start(base: str = Depends(base_url)):
        logger.info("GET /v1/start")
        return {
            "message": "Welcome to the HATEOAS Pizza API",
            "links": _dump(links_for(RouteContext.ENTRY, base)),
        }

    # ── Discovered Endpoints ─────────────────────────

    @app.get("/v1/menu")
    async def get_menu(
        base: str = Depends(base_url), store: OrderStore = Depends(get_store)
    ):
        logger.info("GET /v1/menu")
        return {
            "pizzas": [p.model_dump() for p in store.menu.all()],
            "links": _dump(links_for(RouteContext.MENU, base)),
        }

    @app.post("/v1/order", status_code=201)
    async def place_order(
        req: PlaceOrderRequest,
        base: str = Depends(base_url),
        store: OrderStore = Depends(get_store),
        progression: OrderProgression = Depends(get_progression),
    ):
        try:
            order = commands.place_order(store, progression, req)
        except PizzaOrderError as e:
            return _error(
                e.status_code, e.message, links_for(RouteContext.VALIDATION_FAILED, base)
            )

        logger.info("POST /v1/order - created %s", order.order_id)
        return {
            "order": {
                "orderId": order.order_id,
                "pizzaName": order.pizza_name,
                "quantity": order.quantity,
                "status": order.status.value,
            },
            "links": _dump(links_for(RouteContext.ORDER_CREATED, base, order)),
        }

    @app.get("/v1/track/{order_id}")
    async def track_order(
        order_id: str,
        base: str = Depends(base_url),
        store: OrderStore = Depends(get_store),
    ):
        try:
            order = commands.track_order(store, order_id)
        except NotFoundError as e:
            return _error(404, e.message, links_for(RouteContext.NOT_FOUND, base))

        logger.info("GET /v1/track/%s - status %s", order_id, order.status.value)
        return {
            "order": {
                "orderId": order.order_id,
                "pizzaName": order.pizza_name,
                "quantity": order.quantity,
                "status": order.status.value,
                "createdAt": order.created_at.isoformat(),
            },
            "links": _dump(links_for(RouteContext.TRACK, base, order)),
        }

    @app.delete("/v1/order/{order_id}/cancel")
    async def cancel_order(
        order_id: str,
        base: str = Depends(base_url),
        store: OrderStore = Depends(get_store),
    ):
        try:
            order = commands.cancel_order(store, order_id)
        except NotFoundError as e:
            return _error(404, e.message, links_for(RouteContext.NOT_FOUND, base))
        except IllegalTransitionError as e:
            rejected = store.get(order_id)
            return _error(
                400, e.message, links_for(RouteContext.CANCEL_REJECTED, base, rejected)
            )

        logger.info("DELETE /v1/order/%s/cancel - cancelled", order_id)
        return {
            "order": {
                "orderId": order.order_id,
                "pizzaName": order.pizza_name,
                "status": order.status.value,
            },
            "links": _dump(links_for(RouteContext.CANCELLED, base)),
        }

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "pizza-hateoas"}

    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.hateoas_port)


app = create_app()
