# backend/tests/test_customers.py
from services import customers
from models import CustomerIn


def test_insert_then_get_round_trips_all_fields(db_engine):
    data = CustomerIn(
        name="Acme Traders", phone="555-1", area="North",
        address="12 Market Road", email="ops@acme.test", company="Acme Pvt Ltd",
    )
    new_id = customers.add_customer(data)["id"]

    row = customers.get_customer(new_id)
    assert row["customer_name"] == "Acme Traders"
    assert row["phone_no"] == "555-1"
    assert row["area"] == "North"
    assert row["address"] == "12 Market Road"
    assert row["email"] == "ops@acme.test"
    assert row["company_name"] == "Acme Pvt Ltd"
    assert row["created_at"]


def test_create_returns_id_and_message(client):
    resp = client.post("/api/customers", json={"name": "Acme", "phone": "555-1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == 1
    assert body["message"] == "Customer added"


def test_list_is_ordered_by_id(client):
    for name in ("Zeta", "Alpha", "Mid"):
        client.post("/api/customers", json={"name": name})
    rows = client.get("/api/customers").json()
    assert [r["customer_name"] for r in rows] == ["Zeta", "Alpha", "Mid"]
    assert [r["id"] for r in rows] == sorted(r["id"] for r in rows)


def test_update_and_delete_report_changes(client, customer_id):
    resp = client.put("/api/customers", json={"id": customer_id, "name": "Acme Ltd", "phone": "555-2"})
    assert resp.json() == {"changes": 1}
    assert client.get(f"/api/customers/{customer_id}").json()["phone_no"] == "555-2"

    assert client.delete(f"/api/customers/{customer_id}").json() == {"changes": 1}
    assert client.delete(f"/api/customers/{customer_id}").json() == {"changes": 0}
    assert client.get(f"/api/customers/{customer_id}").status_code == 404


def test_update_missing_customer_is_a_noop(client):
    resp = client.put("/api/customers", json={"id": 999, "name": "Ghost"})
    assert resp.status_code == 200
    assert resp.json() == {"changes": 0}


def test_delete_customer_nulls_calls_and_cascades_repairs_and_amcs(client, customer_id):
    call_id = client.post("/api/service-calls", json={
        "customerId": customer_id, "issue_description": "No power", "area": "North",
    }).json()["id"]
    client.post("/api/repairs", json={
        "customerId": customer_id, "machine_description": "Printer",
        "repair_date": "2026-10-01", "amount_charged": 250,
    })
    client.post("/api/amc", json={
        "customerId": customer_id, "start_date": "2026-01-01", "end_date": "2026-12-31",
    })

    client.delete(f"/api/customers/{customer_id}")

    call = client.get(f"/api/service-calls/{call_id}").json()
    assert call["customer_id"] is None
    assert call["customer_name"] is None
    assert client.get("/api/repairs").json() == []
    assert client.get("/api/amc").json() == []


def test_missing_name_is_a_500_with_error(client):
    resp = client.post("/api/customers", json={"phone": "555-1"})
    assert resp.status_code == 500
    assert "name" in resp.json()["error"]
    assert client.get("/api/customers").json() == []


def test_non_numeric_id_is_a_500_with_error(client):
    resp = client.get("/api/customers/abc")
    assert resp.status_code == 500
    assert "customer_id" in resp.json()["error"]
