"""
JSON document-tree persistence adapter.

The tree is addressed with slash-separated paths ("decks/<id>/contents").
Every operation reads the file, applies the change and writes it back under
a process-wide lock, so the file stays the single source of truth.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
import json
import logging
import os
import tempfile
import threading

from contentdeck.core.errors import StoreError
from contentdeck.domain.keys import generate_push_key

logger = logging.getLogger(__name__)

ROOT_NODES = ("decks",)


def _split(path: str) -> list[str]:
    parts = [p for p in (path or "").split("/") if p]
    if not parts:
        raise ValueError("empty store path")
    return parts


def db_defaults(db: dict) -> dict:
    for name in ROOT_NODES:
        db.setdefault(name, {})
    return db


class JSONTreeStore:
    """Hierarchical key/value store persisted as one JSON document."""

    def __init__(self, path: str | Path, key_factory: Callable[[], str] = generate_push_key) -> None:
        self.path = Path(path)
        self._key_factory = key_factory
        self._lock = threading.Lock()

    # -------------------------- file access --------------------------
    def _load(self) -> dict:
        try:
            if self.path.exists():
                with self.path.open("r", encoding="utf-8") as f:
                    raw = f.read()
                if raw.strip():
                    data = json.loads(raw)
                    if not isinstance(data, dict):
                        raise StoreError(f"{self.path} does not hold a JSON object")
                    return db_defaults(data)
        except (OSError, ValueError) as exc:
            raise StoreError(f"failed to read {self.path}: {exc}") from exc
        return db_defaults({})

    def _save(self, db: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(db, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StoreError(f"failed to write {self.path}: {exc}") from exc

    @staticmethod
    def _walk(db: dict, parts: list[str], create: bool = False) -> dict | None:
        node: Any = db
        for part in parts:
            if not isinstance(node, dict):
                return None
            if part not in node or not isinstance(node[part], dict):
                if not create:
                    return None
                node[part] = {}
            node = node[part]
        return node

    # -------------------------- primitives --------------------------
    def ensure_root(self) -> None:
        """Create the file with its root nodes when missing."""
        with self._lock:
            db = self._load()
            self._save(db)
        logger.info("deck store ready at %s", self.path)

    def get(self, path: str) -> Any:
        parts = _split(path)
        with self._lock:
            db = self._load()
        parent = self._walk(db, parts[:-1])
        if parent is None:
            return None
        return parent.get(parts[-1])

    def set(self, path: str, value: Any) -> None:
        """Write value at path, creating missing parents."""
        parts = _split(path)
        with self._lock:
            db = self._load()
            parent = self._walk(db, parts[:-1], create=True)
            parent[parts[-1]] = value
            self._save(db)

    def push(self, path: str, value: Any) -> str:
        """Store value under a freshly generated child key of path."""
        key = self._key_factory()
        self.set(f"{path}/{key}", value)
        return key

    def remove(self, path: str) -> None:
        """Delete the node at path with its subtree; absent paths are ignored."""
        parts = _split(path)
        with self._lock:
            db = self._load()
            parent = self._walk(db, parts[:-1])
            if parent is None or parts[-1] not in parent:
                return
            del parent[parts[-1]]
            self._save(db)

    def transaction(self, path: str, update_fn: Callable[[Any], Any]) -> Any:
        """
        Atomically replace the value at path with update_fn(current).

        When update_fn returns None nothing is written and None is returned.
        """
        parts = _split(path)
        with self._lock:
            db = self._load()
            parent = self._walk(db, parts[:-1])
            current = parent.get(parts[-1]) if parent is not None else None
            new_value = update_fn(current)
            if new_value is None:
                return None
            parent = self._walk(db, parts[:-1], create=True)
            parent[parts[-1]] = new_value
            self._save(db)
            return new_value

    def new_key(self) -> str:
        return self._key_factory()
