"""Deck service: decks with nested contents on the JSON document tree."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from contentdeck.core.config import get_settings
from contentdeck.core.errors import StoreError, register_error_handlers
from contentdeck.core.utils import mount_static
from contentdeck.routers import decks as decks_router
from contentdeck.routers import pages as pages_router
from contentdeck.services.deck_service import DeckService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    svc: DeckService = app.state.deck_service
    try:
        await run_in_threadpool(svc.ensure_root)
    except StoreError as exc:
        logger.error("Error initializing deck store: %s", exc)
    yield


def create_deck_app(service: DeckService | None = None, *, static_dir: str | None = None) -> FastAPI:
    """Build the deck service app around one DeckService instance."""
    app = FastAPI(title="contentdeck deck API", lifespan=_lifespan)
    app.state.deck_service = service or DeckService()
    register_error_handlers(app)
    mount_static(app, static_dir or os.path.join(get_settings().static_dir, "decks"))
    app.include_router(decks_router.router)
    app.include_router(pages_router.router)
    app.include_router(pages_router.deck_router)
    return app


app = create_deck_app()
