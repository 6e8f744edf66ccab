"""
Classic REST API — FastAPI entry point (port 3000)

The client must know every endpoint and its shape in advance:

  GET    /v1/menu
  POST   /v1/order
  GET    /v1/track/{order_id}
  DELETE /v1/order/{order_id}

Responses are bare payloads; nothing tells the client what it may do next.
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
    get_store,
    init_state,
)
from ..shared.commands import PlaceOrderRequest
from ..shared.config import Settings
from ..shared.errors import PizzaOrderError
from ..shared.orders import OrderStore
from ..shared.progression import OrderProgression
from ..shared.scheduling import Scheduler

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: OrderStore | None = None,
    scheduler: Scheduler | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Pizza API - Classic REST")
    init_state(app, settings, store, scheduler)

    # ── Error Handlers ───────────────────────────────

    @app.exception_handler(PizzaOrderError)
    async def pizza_order_error(request: Request, exc: PizzaOrderError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400, content={"error": "pizzaId and quantity are required"}
        )

    # ── Endpoints ────────────────────────────────────

    @app.get("/v1/menu")
    async def get_menu(store: OrderStore = Depends(get_store)):
        logger.info("GET /v1/menu")
        return [p.model_dump() for p in store.menu.all()]

    @app.post("/v1/order", status_code=201)
    async def place_order(
        req: PlaceOrderRequest,
        store: OrderStore = Depends(get_store),
        progression: OrderProgression = Depends(get_progression),
    ):
        order = commands.place_order(store, progression, req)
        logger.info("POST /v1/order - created %s", order.order_id)
        return {"orderId": order.order_id, "status": order.status.value}

    @app.get("/v1/track/{order_id}")
    async def track_order(order_id: str, store: OrderStore = Depends(get_store)):
        order = commands.track_order(store, order_id)
        logger.info("GET /v1/track/%s - status %s", order_id, order.status.value)
        return {"orderId": order.order_id, "status": order.status.value}

    @app.delete("/v1/order/{order_id}")
    async def cancel_order(order_id: str, store: OrderStore = Depends(get_store)):
        order = commands.cancel_order(store, order_id)
        logger.info("DELETE /v1/order/%s - cancelled", order_id)
        return {"orderId": order.order_id, "status": order.status.value}

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "pizza-rest"}

    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.rest_port)


app = create_app()
