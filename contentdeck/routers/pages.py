from __future__ import annotations

import os

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from contentdeck.core.errors import NotFoundError

router = APIRouter(prefix="", tags=["pages"])
deck_router = APIRouter(prefix="", tags=["pages"])


def _static_dir(request: Request) -> str:
    static_dir = getattr(getattr(request.app, "state", None), "static_dir", None)
    if static_dir:
        return static_dir
    raise RuntimeError("Static directory not configured")


def _page(request: Request, name: str) -> FileResponse:
    path = os.path.join(_static_dir(request), name)
    if not os.path.isfile(path):
        raise NotFoundError("Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
def index(request: Request):
    return _page(request, "index.html")


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@deck_router.get("/deck", include_in_schema=False)
def deck(request: Request):
    return _page(request, "deck.html")
