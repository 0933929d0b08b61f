"""Content service: CRUD over the flat `content` table."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from contentdeck.core.config import get_settings
from contentdeck.core.errors import StoreError, register_error_handlers
from contentdeck.core.utils import mount_static
from contentdeck.routers import content as content_router
from contentdeck.routers import pages as pages_router
from contentdeck.services.content_service import ContentService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    svc: ContentService = app.state.content_service
    try:
        await run_in_threadpool(svc.ensure_schema)
        logger.info("Database table 'content' is ready.")
    except StoreError as exc:
        # The process keeps serving; requests will surface 500 until the DB is back.
        logger.error("Error initializing database: %s", exc)
    yield


def create_content_app(service: ContentService | None = None, *, static_dir: str | None = None) -> FastAPI:
    """Build the content service app around one ContentService instance."""
    app = FastAPI(title="contentdeck content API", lifespan=_lifespan)
    app.state.content_service = service or ContentService()
    register_error_handlers(app)
    mount_static(app, static_dir or os.path.join(get_settings().static_dir, "content"))
    app.include_router(content_router.router)
    app.include_router(pages_router.router)
    return app


app = create_content_app()
