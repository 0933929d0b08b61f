from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from contentdeck.services.deck_service import DeckService

router = APIRouter(prefix="/api/decks", tags=["decks"])


def _get_deck_service(request: Request) -> DeckService:
    svc = getattr(getattr(request.app, "state", None), "deck_service", None)
    if not svc:
        raise RuntimeError("DeckService not configured")
    return svc


def _field(payload: Optional[dict], name: str):
    return (payload or {}).get(name)


@router.get("")
def list_decks(request: Request):
    return _get_deck_service(request).list_decks()


@router.post("", status_code=201)
def create_deck(request: Request, payload: Optional[dict] = Body(None)):
    return _get_deck_service(request).create_deck(_field(payload, "title"))


@router.get("/{deck_id}")
def get_deck(deck_id: str, request: Request):
    return _get_deck_service(request).get_deck(deck_id)


@router.delete("/{deck_id}")
def delete_deck(deck_id: str, request: Request):
    # Deleting an unknown deck still answers 200.
    _get_deck_service(request).delete_deck(deck_id)
    return {"message": "Deck deleted"}


@router.post("/{deck_id}/contents", status_code=201)
def add_content(deck_id: str, request: Request, payload: Optional[dict] = Body(None)):
    svc = _get_deck_service(request)
    return svc.add_content(deck_id, _field(payload, "description"))


@router.put("/{deck_id}/contents/{content_id}")
def update_content(deck_id: str, content_id: str, request: Request, payload: Optional[dict] = Body(None)):
    svc = _get_deck_service(request)
    svc.update_content(deck_id, content_id, _field(payload, "description"))
    return {"message": "Content updated"}


@router.delete("/{deck_id}/contents/{content_id}")
def delete_content(deck_id: str, content_id: str, request: Request):
    _get_deck_service(request).delete_content(deck_id, content_id)
    return {"message": "Content deleted"}
