from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from contentdeck.core.errors import StoreError
from contentdeck.deck_app import create_deck_app
from contentdeck.services.deck_service import DeckService


@pytest.fixture()
def static_dir(tmp_path):
    web = tmp_path / "web"
    web.mkdir()
    (web / "index.html").write_text("<h1>Decks</h1>", encoding="utf-8")
    (web / "deck.html").write_text("<h1>Deck</h1>", encoding="utf-8")
    return web


@pytest.fixture()
def client(deck_repo, static_dir):
    app = create_deck_app(DeckService(deck_repo), static_dir=str(static_dir))
    with TestClient(app) as test_client:
        yield test_client


def test_static_pages(client):
    assert "Decks" in client.get("/").text
    assert "Deck" in client.get("/deck").text
    assert client.get("/static/deck.html").status_code == 200


def test_spanish_deck_flow(client):
    created = client.post("/api/decks", json={"title": "Spanish"})
    assert created.status_code == 201
    deck = created.json()
    assert set(deck) == {"id", "title", "createdAt"}
    assert deck["title"] == "Spanish"

    added = client.post(f"/api/decks/{deck['id']}/contents", json={"description": "hola"})
    assert added.status_code == 201
    item = added.json()
    assert set(item) == {"id", "description", "createdAt"}

    fetched = client.get(f"/api/decks/{deck['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == {**deck, "contents": [item]}


def test_content_count_matches_added_contents(client):
    deck = client.post("/api/decks", json={"title": "Count"}).json()
    for n in range(4):
        client.post(f"/api/decks/{deck['id']}/contents", json={"description": f"card {n}"})
    listing = client.get("/api/decks").json()
    [entry] = [d for d in listing if d["id"] == deck["id"]]
    assert entry == {**deck, "contentCount": 4}


def test_delete_deck_twice_returns_200_both_times(client):
    deck = client.post("/api/decks", json={"title": "Gone"}).json()
    for _ in range(2):
        resp = client.delete(f"/api/decks/{deck['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Deck deleted"}
    assert client.get(f"/api/decks/{deck['id']}").status_code == 404


def test_get_missing_deck_is_404(client):
    resp = client.get("/api/decks/missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Deck not found"}


def test_create_deck_requires_title(client):
    for payload in ({}, {"title": ""}, {"title": None}):
        resp = client.post("/api/decks", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Title is required"}
    assert client.get("/api/decks").json() == []


def test_add_content_requires_description(client):
    deck = client.post("/api/decks", json={"title": "T"}).json()
    resp = client.post(f"/api/decks/{deck['id']}/contents", json={"description": ""})
    assert resp.status_code == 400
    assert client.get(f"/api/decks/{deck['id']}").json()["contents"] == []


def test_add_content_to_missing_deck_is_404(client):
    resp = client.post("/api/decks/ghost/contents", json={"description": "hola"})
    assert resp.status_code == 404
    assert client.get("/api/decks").json() == []


def test_update_and_delete_content(client):
    deck = client.post("/api/decks", json={"title": "T"}).json()
    item = client.post(f"/api/decks/{deck['id']}/contents", json={"description": "old"}).json()
    base = f"/api/decks/{deck['id']}/contents/{item['id']}"

    updated = client.put(base, json={"description": "new"})
    assert updated.status_code == 200
    assert updated.json() == {"message": "Content updated"}
    assert client.get(f"/api/decks/{deck['id']}").json()["contents"][0]["description"] == "new"

    assert client.put(base, json={}).status_code == 400

    deleted = client.delete(base)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Content deleted"}
    assert client.get(f"/api/decks/{deck['id']}").json()["contents"] == []


def test_update_and_delete_absent_content_succeed_silently(client):
    assert client.put("/api/decks/ghost/contents/none", json={"description": "x"}).status_code == 200
    assert client.delete("/api/decks/ghost/contents/none").status_code == 200
    assert client.get("/api/decks").json() == []


def test_store_failure_maps_to_generic_500(static_dir):
    class BrokenRepository:
        def ensure_root(self):
            raise StoreError("disk full")

        def list_decks(self):
            raise StoreError("disk full")

    app = create_deck_app(DeckService(BrokenRepository()), static_dir=str(static_dir))
    with TestClient(app) as test_client:
        resp = test_client.get("/api/decks")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Server error"}
