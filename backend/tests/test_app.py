# backend/tests/test_app.py
from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy import text

import database
import main
from services import clock


def test_startup_builds_schema_sweeps_and_seeds(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'startup.db'}"

    # A database left over from a previous run, with a contract that lapsed
    database.init_engine(url=url)
    from models import create_tables
    create_tables()
    with database.get_db() as db:
        db.execute(text("INSERT INTO customers (customer_name) VALUES ('Acme')"))
        db.execute(text(
            "INSERT INTO amc_records (customer_id, start_date, end_date, status) "
            "VALUES (1, '2025-01-01', :end, 'Active')"
        ), {"end": (clock.today() - timedelta(days=2)).isoformat()})
        db.commit()
    database.dispose_engine()

    monkeypatch.setattr(database, "connect", lambda: database.init_engine(url=url))

    with TestClient(main.app) as client:
        assert client.post("/api/login", json={"username": "admin", "password": "admin"}).status_code == 200
        assert client.get("/api/amc").json()[0]["status"] == "Expired"

    # engine released on shutdown
    assert database._engine is None


def test_database_errors_become_500_with_message(client):
    with database.get_db() as db:
        db.execute(text("DROP TABLE products"))
        db.commit()

    resp = client.get("/api/products")
    assert resp.status_code == 500
    assert "no such table" in resp.json()["error"]
