"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from contentdeck.core.errors import NotFoundError, StoreError
from contentdeck.db.create_tables import create_all
from contentdeck.db.models import Content
from contentdeck.db.session import get_session


def _store_call(fn):
    """Translate driver/engine failures into StoreError."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StoreError(f"{fn.__name__} failed: {exc}") from exc
    return wrapper


class SQLContentRepository:
    """CRUD helpers for the content table."""

    @_store_call
    def ensure_schema(self) -> None:
        create_all()

    @_store_call
    def insert(self, description: str) -> dict:
        entity = Content(description=description, created_at=datetime.now(timezone.utc))
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity.to_dict()

    @_store_call
    def list_all(self) -> list[dict]:
        with get_session() as session:
            rows = session.execute(select(Content).order_by(Content.id.asc())).scalars().all()
            return [row.to_dict() for row in rows]

    @_store_call
    def get_by_id(self, content_id: int) -> dict:
        with get_session() as session:
            entity = session.get(Content, content_id)
            if entity is None:
                raise NotFoundError("Content not found")
            return entity.to_dict()

    @_store_call
    def update(self, content_id: int, description: str) -> dict:
        with get_session() as session:
            stmt = (
                update(Content)
                .where(Content.id == content_id)
                .values(description=description)
                .returning(Content.id, Content.description, Content.created_at)
            )
            row = session.execute(stmt).mappings().first()
            if row is None:
                session.rollback()
                raise NotFoundError("Content not found")
            session.commit()
            return dict(row)

    @_store_call
    def delete(self, content_id: int) -> dict:
        with get_session() as session:
            stmt = (
                delete(Content)
                .where(Content.id == content_id)
                .returning(Content.id, Content.description, Content.created_at)
            )
            row = session.execute(stmt).mappings().first()
            if row is None:
                session.rollback()
                raise NotFoundError("Content not found")
            session.commit()
            return dict(row)
