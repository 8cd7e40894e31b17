# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient

import database
from main import app
from models import init_db


@pytest.fixture()
def db_engine(tmp_path):
    """Fresh SQLite database with the full schema for every test"""
    engine = database.init_engine(url=f"sqlite:///{tmp_path / 'service_tracker.db'}")
    init_db()
    yield engine
    database.dispose_engine()


@pytest.fixture()
def client(db_engine):
    # Not used as a context manager: the lifespan (MySQL connect) stays off
    return TestClient(app)


@pytest.fixture()
def customer_id(client):
    resp = client.post("/api/customers", json={"name": "Acme", "phone": "555-1"})
    return resp.json()["id"]
