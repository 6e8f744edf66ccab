"""
Per-app wiring: the store, the progression timer and the settings live on
``app.state`` and reach the handlers through FastAPI dependencies, so tests
can build an app around their own store and a virtual-time scheduler.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ALLOW_ORIGIN_REGEX, CORS_ALLOW_ORIGINS, Settings
from .orders import OrderStore
from .progression import OrderProgression
from .scheduling import AsyncioScheduler, Scheduler


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))


def init_state(
    app: FastAPI,
    settings: Settings,
    store: OrderStore | None = None,
    scheduler: Scheduler | None = None,
) -> None:
    if store is None:
        store = OrderStore()
    if scheduler is None:
        scheduler = AsyncioScheduler()
    app.state.settings = settings
    app.state.store = store
    app.state.progression = OrderProgression.from_settings(
        store, scheduler, settings
    )

    # CORS: static front-ends served from dev servers, github.io and netlify
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_origin_regex=CORS_ALLOW_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> OrderStore:
    return request.app.state.store


def get_progression(request: Request) -> OrderProgression:
    return request.app.state.progression
