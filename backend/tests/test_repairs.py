# backend/tests/test_repairs.py
import pytest


@pytest.fixture()
def repairs(client, customer_id):
    for day, machine in (("2026-03-05", "Printer"), ("2026-03-20", "Scanner"), ("2026-04-02", "UPS")):
        client.post("/api/repairs", json={
            "customerId": customer_id, "machine_description": machine,
            "repair_description": f"{machine} serviced", "repair_date": day,
            "amount_charged": 100,
        })


def test_list_newest_first_with_aliases(client, repairs):
    rows = client.get("/api/repairs").json()
    assert [r["repair_date"] for r in rows] == ["2026-04-02", "2026-03-20", "2026-03-05"]

    top = rows[0]
    assert top["customer_name"] == "Acme"
    assert top["phone_no"] == "555-1"
    assert top["machine"] == "UPS"
    assert top["details"] == "UPS serviced"
    assert top["amount"] == 100
    assert top["date"] == "2026-04-02"


@pytest.mark.parametrize("query, expected", [
    ("?startDate=2026-03-20", ["2026-04-02", "2026-03-20"]),
    ("?endDate=2026-03-20", ["2026-03-20", "2026-03-05"]),
    ("?startDate=2026-03-05&endDate=2026-03-20", ["2026-03-20", "2026-03-05"]),
    ("?startDate=2026-05-01", []),
])
def test_date_bounds_are_inclusive(client, repairs, query, expected):
    rows = client.get(f"/api/repairs{query}").json()
    assert [r["repair_date"] for r in rows] == expected


def test_update_and_delete(client, repairs, customer_id):
    record = client.get("/api/repairs").json()[0]
    resp = client.put("/api/repairs", json={
        "id": record["id"], "customerId": customer_id,
        "machine_description": "UPS 1kVA", "repair_description": "Battery swap",
        "repair_date": "2026-04-03", "amount_charged": 1800,
    })
    assert resp.json() == {"changes": 1}
    assert client.get("/api/repairs").json()[0]["amount_charged"] == 1800

    assert client.delete(f"/api/repairs/{record['id']}").json() == {"changes": 1}
    assert len(client.get("/api/repairs").json()) == 2


def test_repair_for_unknown_customer_is_a_500(client):
    resp = client.post("/api/repairs", json={"customerId": 77, "repair_date": "2026-01-01"})
    assert resp.status_code == 500
    assert "FOREIGN KEY" in resp.json()["error"]
