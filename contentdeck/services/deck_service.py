"""Deck use cases for the hierarchical variant."""

from __future__ import annotations

from contentdeck.core.config import get_settings
from contentdeck.repositories.deck_repository import DeckRepository
from contentdeck.repositories.json_storage import JSONTreeStore
from contentdeck.services.content_service import require_text


class DeckService:
    """Validates input and forwards to the deck repository."""

    def __init__(self, repository: DeckRepository | None = None) -> None:
        if repository is None:
            repository = DeckRepository(JSONTreeStore(get_settings().deck_store_path))
        self.repository = repository

    def ensure_root(self) -> None:
        self.repository.ensure_root()

    def list_decks(self) -> list[dict]:
        return self.repository.list_decks()

    def create_deck(self, title) -> dict:
        return self.repository.create_deck(require_text(title, "Title is required"))

    def get_deck(self, deck_id: str) -> dict:
        return self.repository.get_deck(deck_id)

    def delete_deck(self, deck_id: str) -> None:
        self.repository.delete_deck(deck_id)

    def add_content(self, deck_id: str, description) -> dict:
        text = require_text(description, "Description is required")
        return self.repository.add_content(deck_id, text)

    def update_content(self, deck_id: str, content_id: str, description) -> None:
        text = require_text(description, "Description is required")
        self.repository.update_content(deck_id, content_id, text)

    def delete_content(self, deck_id: str, content_id: str) -> None:
        self.repository.delete_content(deck_id, content_id)
