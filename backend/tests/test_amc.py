# backend/tests/test_amc.py
from datetime import timedelta

import pytest

from services import clock, maintenance


def _add(client, customer_id, end, status="Active"):
    return client.post("/api/amc", json={
        "customerId": customer_id, "start_date": "2026-01-01",
        "end_date": end.isoformat(), "amount": 5000, "status": status,
    }).json()["id"]


@pytest.fixture()
def contracts(client, customer_id):
    today = clock.today()
    return {
        "today": _add(client, customer_id, today),
        "in_30": _add(client, customer_id, today + timedelta(days=30)),
        "in_31": _add(client, customer_id, today + timedelta(days=31)),
        "past": _add(client, customer_id, today - timedelta(days=1)),
        "expired_soon": _add(client, customer_id, today + timedelta(days=5), status="Expired"),
    }


def test_status_defaults_to_active(client, customer_id):
    new_id = client.post("/api/amc", json={
        "customerId": customer_id, "start_date": "2026-01-01", "end_date": "2027-01-01",
    }).json()["id"]
    row = next(r for r in client.get("/api/amc").json() if r["id"] == new_id)
    assert row["status"] == "Active"
    assert row["customer_name"] == "Acme"


def test_list_ordered_by_end_date(client, contracts):
    rows = client.get("/api/amc").json()
    ends = [r["end_date"] for r in rows]
    assert ends == sorted(ends)


def test_expiring_soon_window(client, contracts):
    rows = client.get("/api/amc?expiringSoon=true").json()
    assert {r["id"] for r in rows} == {contracts["today"], contracts["in_30"]}


def test_expiring_soon_overrides_status_filter(client, contracts):
    rows = client.get("/api/amc?status=Expired&expiringSoon=true").json()
    assert {r["id"] for r in rows} == {contracts["today"], contracts["in_30"]}


def test_status_filter(client, contracts):
    rows = client.get("/api/amc?status=Expired").json()
    assert [r["id"] for r in rows] == [contracts["expired_soon"]]


def test_sweep_expires_only_past_active_contracts(client, contracts):
    # Nothing changes until the sweep runs
    past = next(r for r in client.get("/api/amc").json() if r["id"] == contracts["past"])
    assert past["status"] == "Active"

    assert maintenance.sweep_amc_statuses() == 1

    statuses = {r["id"]: r["status"] for r in client.get("/api/amc").json()}
    assert statuses[contracts["past"]] == "Expired"
    assert statuses[contracts["today"]] == "Active"
    assert statuses[contracts["in_31"]] == "Active"

    assert maintenance.sweep_amc_statuses() == 0


def test_update_and_delete(client, contracts, customer_id):
    resp = client.put("/api/amc", json={
        "id": contracts["in_31"], "customerId": customer_id,
        "start_date": "2026-02-01", "end_date": "2027-02-01",
        "amount": 6000, "status": "Active", "notes": "renewed",
    })
    assert resp.json() == {"changes": 1}
    assert client.delete(f"/api/amc/{contracts['in_31']}").json() == {"changes": 1}
    assert client.delete(f"/api/amc/{contracts['in_31']}").json() == {"changes": 0}
