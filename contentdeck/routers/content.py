from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from contentdeck.services.content_service import ContentService

router = APIRouter(prefix="/api/content", tags=["content"])


def _get_content_service(request: Request) -> ContentService:
    svc = getattr(getattr(request.app, "state", None), "content_service", None)
    if not svc:
        raise RuntimeError("ContentService not configured")
    return svc


def _field(payload: Optional[dict], name: str):
    return (payload or {}).get(name)


@router.get("")
def list_contents(request: Request):
    return _get_content_service(request).list_contents()


@router.get("/{content_id}")
def get_content(content_id: int, request: Request):
    return _get_content_service(request).get_content(content_id)


@router.post("", status_code=201)
def create_content(request: Request, payload: Optional[dict] = Body(None)):
    svc = _get_content_service(request)
    return svc.create_content(_field(payload, "description"))


@router.put("/{content_id}")
def update_content(content_id: int, request: Request, payload: Optional[dict] = Body(None)):
    svc = _get_content_service(request)
    return svc.update_content(content_id, _field(payload, "description"))


@router.delete("/{content_id}")
def delete_content(content_id: int, request: Request):
    _get_content_service(request).delete_content(content_id)
    return {"message": "Content deleted"}
