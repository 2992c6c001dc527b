"""API tests. Each test gets a fresh in-memory directory."""

import pytest
from fastapi.testclient import TestClient

from api import main as api_main
from api.main import app
from api.render import avatar_initial, render_table


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("CONTACTBOOK_STORE_PATH", raising=False)
    monkeypatch.delenv("CONTACTBOOK_STORAGE_KEY", raising=False)
    app.state.controller = None
    yield TestClient(app)
    app.state.controller = None


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_empty_directory(client):
    r = client.get("/directory")
    assert r.status_code == 200
    body = r.json()
    assert body["contacts"] == []
    assert body["error_message"] is None
    assert body["editing"] == {"state": "idle", "target_id": None}
    assert body["submit_label"] == "Add contact"


def test_submit_and_edit_flow(client):
    body = client.post("/directory/submit", json={"name": "Ann", "phone": "555-0101"}).json()
    assert len(body["contacts"]) == 1
    contact_id = body["contacts"][0]["id"]

    body = client.post(f"/directory/edit/{contact_id}").json()
    assert body["editing"] == {"state": "editing", "target_id": contact_id}
    assert body["form_name"] == "Ann"
    assert body["show_cancel"] is True

    body = client.post("/directory/submit", json={"name": "Ann B.", "phone": "555-0102"}).json()
    assert body["editing"]["state"] == "idle"
    assert body["contacts"] == [{"id": contact_id, "name": "Ann B.", "phone": "555-0102"}]


def test_validation_error_is_returned_in_model(client):
    r = client.post("/directory/submit", json={"name": "", "phone": "12345"})
    assert r.status_code == 200
    assert r.json()["error_message"] == "name required"


def test_cancel(client):
    contact_id = client.post("/directory/submit", json={"name": "Ann", "phone": "555"}).json()[
        "contacts"
    ][0]["id"]
    client.post(f"/directory/edit/{contact_id}")
    body = client.post("/directory/cancel").json()
    assert body["editing"]["state"] == "idle"
    assert body["form_name"] == ""


def test_delete_needs_confirmation(client):
    contact_id = client.post("/directory/submit", json={"name": "Ann", "phone": "555"}).json()[
        "contacts"
    ][0]["id"]

    body = client.post(f"/directory/delete/{contact_id}", json={"confirmed": False}).json()
    assert len(body["contacts"]) == 1

    body = client.post(f"/directory/delete/{contact_id}", json={"confirmed": True}).json()
    assert body["contacts"] == []


def test_file_store_from_env(tmp_path, monkeypatch, client):
    path = tmp_path / "contacts.json"
    monkeypatch.setenv("CONTACTBOOK_STORE_PATH", str(path))
    monkeypatch.setenv("CONTACTBOOK_STORAGE_KEY", "my-key")
    app.state.controller = None

    client.post("/directory/submit", json={"name": "Ann", "phone": "555"})
    assert path.exists()
    assert "my-key" in path.read_text(encoding="utf-8")

    app.state.controller = api_main._build_controller()
    assert len(client.get("/directory").json()["contacts"]) == 1


def test_index_page_escapes_and_shows_error(client):
    client.post("/directory/submit", json={"name": "<b>Ann</b>", "phone": "555"})
    client.post("/directory/submit", json={"name": "", "phone": ""})
    r = client.get("/")
    assert r.status_code == 200
    assert "&lt;b&gt;Ann&lt;/b&gt;" in r.text
    assert "<b>Ann</b>" not in r.text
    assert "name required" in r.text


def test_render_table_empty_state():
    assert "No contacts yet" in render_table([])


def test_avatar_initial():
    assert avatar_initial("  ann") == "A"
    assert avatar_initial("") == "?"
    assert avatar_initial(None) == "?"
