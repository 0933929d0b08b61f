"""
Smoke tests for SQLContentRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from contentdeck.core import config as core_config
from contentdeck.core.errors import NotFoundError, StoreError
from contentdeck.db import session as db_session
from contentdeck.repositories.sql_repository import SQLContentRepository


@pytest.fixture()
def repo(temp_db):
    repository = SQLContentRepository()
    repository.ensure_schema()
    return repository


def test_ensure_schema_is_idempotent(repo):
    repo.ensure_schema()
    repo.ensure_schema()
    assert repo.list_all() == []


def test_insert_assigns_increasing_ids_and_timestamp(repo):
    first = repo.insert("buy milk")
    second = repo.insert("walk dog")
    assert first["id"] < second["id"]
    assert first["description"] == "buy milk"
    assert first["created_at"] is not None
    assert [row["id"] for row in repo.list_all()] == [first["id"], second["id"]]


def test_update_returns_post_update_row(repo):
    row = repo.insert("draft")
    updated = repo.update(row["id"], "final")
    assert updated["id"] == row["id"]
    assert updated["description"] == "final"
    assert repo.get_by_id(row["id"])["description"] == "final"


def test_update_missing_row_raises_not_found(repo):
    repo.insert("keep me")
    with pytest.raises(NotFoundError):
        repo.update(999, "nope")
    assert [r["description"] for r in repo.list_all()] == ["keep me"]


def test_delete_returns_row_then_not_found(repo):
    row = repo.insert("temp")
    deleted = repo.delete(row["id"])
    assert deleted["id"] == row["id"]
    assert deleted["description"] == "temp"
    with pytest.raises(NotFoundError):
        repo.delete(row["id"])
    with pytest.raises(NotFoundError):
        repo.get_by_id(row["id"])


def test_ids_are_not_reused_after_delete(repo):
    row = repo.insert("last")
    repo.delete(row["id"])
    assert repo.insert("next")["id"] > row["id"]


def test_missing_database_url_surfaces_store_error(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        with pytest.raises(StoreError):
            SQLContentRepository().list_all()
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
