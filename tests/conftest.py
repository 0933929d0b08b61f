from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Makes the contentdeck package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contentdeck.core import config as core_config  # noqa: E402
from contentdeck.db import session as db_session  # noqa: E402
from contentdeck.repositories.deck_repository import DeckRepository  # noqa: E402
from contentdeck.repositories.json_storage import JSONTreeStore  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    yield db_file

    try:
        db_session.get_engine().dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def tree_store(tmp_path):
    return JSONTreeStore(tmp_path / "decks.json")


@pytest.fixture()
def deck_repo(tree_store):
    return DeckRepository(tree_store)
