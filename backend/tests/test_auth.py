# backend/tests/test_auth.py
from config import settings
from services import maintenance


def test_default_user_is_seeded_once(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "user": {"username": "admin", "role": "admin"}}

    assert maintenance.ensure_default_user() is False


def test_wrong_password_is_401(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": settings.LOGIN_FAILED_MESSAGE}


def test_change_password_with_wrong_old_password(client):
    resp = client.post("/api/change-password", json={
        "username": "admin", "oldPassword": "wrong", "newPassword": "s3cret",
    })
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Incorrect old password"}

    assert client.post("/api/login", json={"username": "admin", "password": "admin"}).status_code == 200
    assert client.post("/api/login", json={"username": "admin", "password": "s3cret"}).status_code == 401


def test_change_password_switches_credentials(client):
    resp = client.post("/api/change-password", json={
        "username": "admin", "oldPassword": "admin", "newPassword": "s3cret",
    })
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Password updated"}

    assert client.post("/api/login", json={"username": "admin", "password": "s3cret"}).status_code == 200
    assert client.post("/api/login", json={"username": "admin", "password": "admin"}).status_code == 401
