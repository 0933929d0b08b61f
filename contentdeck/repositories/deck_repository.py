"""Deck/content access on top of the JSON document tree."""
from __future__ import annotations

from datetime import datetime, timezone

from contentdeck.core.errors import NotFoundError
from contentdeck.repositories.json_storage import JSONTreeStore

DECKS = "decks"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _deck_path(deck_id: str) -> str:
    return f"{DECKS}/{deck_id}"


def _content_path(deck_id: str, content_id: str) -> str:
    return f"{DECKS}/{deck_id}/contents/{content_id}"


def _content_entries(deck: dict) -> list[dict]:
    contents = deck.get("contents") or {}
    return [
        {
            "id": key,
            "description": item.get("description", ""),
            "createdAt": item.get("createdAt"),
        }
        for key, item in sorted(contents.items())
        if isinstance(item, dict)
    ]


class DeckRepository:
    """CRUD helpers for decks and the contents nested under them."""

    def __init__(self, store: JSONTreeStore) -> None:
        self.store = store

    def ensure_root(self) -> None:
        self.store.ensure_root()

    # -------------------------- decks --------------------------
    def create_deck(self, title: str) -> dict:
        created_at = _now_iso()
        key = self.store.push(DECKS, {"title": title, "createdAt": created_at, "contents": {}})
        return {"id": key, "title": title, "createdAt": created_at}

    def list_decks(self) -> list[dict]:
        decks = self.store.get(DECKS) or {}
        # contentCount is derived on every read, never stored.
        return [
            {
                "id": key,
                "title": deck.get("title", ""),
                "createdAt": deck.get("createdAt"),
                "contentCount": len(deck.get("contents") or {}),
            }
            for key, deck in sorted(decks.items())
            if isinstance(deck, dict)
        ]

    def get_deck(self, deck_id: str) -> dict:
        deck = self.store.get(_deck_path(deck_id))
        if not isinstance(deck, dict):
            raise NotFoundError("Deck not found")
        return {
            "id": deck_id,
            "title": deck.get("title", ""),
            "createdAt": deck.get("createdAt"),
            "contents": _content_entries(deck),
        }

    def delete_deck(self, deck_id: str) -> None:
        self.store.remove(_deck_path(deck_id))

    # -------------------------- contents --------------------------
    def add_content(self, deck_id: str, description: str) -> dict:
        key = self.store.new_key()
        created_at = _now_iso()

        def _append(deck):
            if not isinstance(deck, dict):
                return None
            contents = deck.get("contents")
            if not isinstance(contents, dict):
                contents = deck["contents"] = {}
            contents[key] = {"description": description, "createdAt": created_at}
            return deck

        if self.store.transaction(_deck_path(deck_id), _append) is None:
            raise NotFoundError("Deck not found")
        return {"id": key, "description": description, "createdAt": created_at}

    def update_content(self, deck_id: str, content_id: str, description: str) -> None:
        def _set_description(item):
            if not isinstance(item, dict):
                return None
            item["description"] = description
            return item

        # Absent deck/content is a silent no-op; no partial node gets created.
        self.store.transaction(_content_path(deck_id, content_id), _set_description)

    def delete_content(self, deck_id: str, content_id: str) -> None:
        self.store.remove(_content_path(deck_id, content_id))
