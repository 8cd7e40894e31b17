# backend/tests/test_settings.py
def test_empty_settings_is_an_object(client):
    assert client.get("/api/settings").json() == {}


def test_save_inserts_then_overwrites(client):
    resp = client.post("/api/settings", json=[
        {"key": "companyName", "value": "Acme Services"},
        {"key": "phone", "value": "555-1"},
    ])
    assert resp.json() == {"success": True, "message": "Settings saved"}

    client.post("/api/settings", json=[
        {"key": "companyName", "value": "Acme Services Pvt Ltd"},
        {"key": "gst", "value": 24},
    ])

    assert client.get("/api/settings").json() == {
        "companyName": "Acme Services Pvt Ltd",
        "phone": "555-1",
        "gst": "24",
    }


def test_non_array_body_is_rejected(client):
    resp = client.post("/api/settings", json={"key": "companyName", "value": "Acme"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Data should be an array of settings"}
    assert client.get("/api/settings").json() == {}


def test_item_without_key_is_rejected(client):
    resp = client.post("/api/settings", json=[{"value": "orphan"}])
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_non_string_values_are_stored_as_json_text(client):
    client.post("/api/settings", json=[
        {"key": "gstEnabled", "value": True},
        {"key": "taxRate", "value": 18.5},
        {"key": "note", "value": None},
    ])
    assert client.get("/api/settings").json() == {
        "gstEnabled": "true",
        "taxRate": "18.5",
        "note": None,
    }


def test_unsupported_dialect_is_a_500_with_error(db_engine, monkeypatch):
    from fastapi.testclient import TestClient
    from main import app
    from services import settings_store

    monkeypatch.setattr(settings_store, "dialect_name", lambda: "postgresql")
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post("/api/settings", json=[{"key": "companyName", "value": "Acme"}])
    assert resp.status_code == 500
    assert resp.json() == {"error": "Settings upsert is not supported on postgresql"}
