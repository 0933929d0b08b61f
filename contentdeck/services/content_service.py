"""Content use cases for the flat (relational) variant."""

from __future__ import annotations

from contentdeck.core.errors import ValidationError
from contentdeck.repositories.sql_repository import SQLContentRepository


def require_text(value, message: str) -> str:
    """Return value unchanged, or raise ValidationError when empty/absent."""
    if not isinstance(value, str) or not value:
        raise ValidationError(message)
    return value


class ContentService:
    """Validates input and forwards to the content repository."""

    def __init__(self, repository: SQLContentRepository | None = None) -> None:
        self.repository = repository or SQLContentRepository()

    def ensure_schema(self) -> None:
        self.repository.ensure_schema()

    def list_contents(self) -> list[dict]:
        return self.repository.list_all()

    def get_content(self, content_id: int) -> dict:
        return self.repository.get_by_id(content_id)

    def create_content(self, description) -> dict:
        text = require_text(description, "Description is required")
        return self.repository.insert(text)

    def update_content(self, content_id: int, description) -> dict:
        text = require_text(description, "Description is required")
        return self.repository.update(content_id, text)

    def delete_content(self, content_id: int) -> dict:
        return self.repository.delete(content_id)
