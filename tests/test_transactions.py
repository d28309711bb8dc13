from decimal import Decimal

from tests.helpers import error_of


def _txn(property_id, **overrides):
    payload = {
        "property_id": property_id,
        "amount": 2000,
        "transaction_type": "income",
        "description": "January rent",
        "category": "rent",
        "payment_method": "bank transfer",
    }
    payload.update(overrides)
    return payload


def test_create_transaction_records_caller_and_date(client, make_property):
    prop = make_property()
    r = client.post("/api/transactions", json=_txn(prop["id"]), headers={"X-Caller-Id": "clerk-7"})
    assert r.status_code == 201
    txn = r.json()
    assert txn["recorded_by"] == "clerk-7"
    assert txn["date"]
    assert Decimal(txn["amount"]) == Decimal("2000")


def test_create_then_get_transaction(client, make_property):
    txn = client.post("/api/transactions", json=_txn(make_property()["id"])).json()
    r = client.get(f"/api/transactions/{txn['id']}")
    assert r.status_code == 200
    assert r.json() == txn


def test_missing_fields_are_invalid(client, make_property):
    r = client.post("/api/transactions", json=_txn(make_property()["id"], category=""))
    assert error_of(r)[0] == "InvalidPayload"
    r = client.post("/api/transactions", json=_txn(make_property()["id"], amount=0))
    assert error_of(r)[0] == "InvalidPayload"


def test_unknown_property_is_not_found(client):
    r = client.post("/api/transactions", json=_txn("nowhere"))
    assert r.status_code == 404
    assert error_of(r) == ("NotFound", "Property not found")


def test_get_all_transactions(client, make_property):
    assert error_of(client.get("/api/transactions")) == ("NotFound", "No financial transactions found")
    prop = make_property()
    client.post("/api/transactions", json=_txn(prop["id"]))
    client.post("/api/transactions", json=_txn(prop["id"], transaction_type="expense"))
    assert len(client.get("/api/transactions").json()) == 2


def test_get_missing_transaction(client):
    r = client.get("/api/transactions/nah")
    assert error_of(r) == ("NotFound", "Financial transaction with ID nah not found")


def test_transactions_by_property(client, make_property):
    first, second = make_property(), make_property(address="9 Elm St")
    a = client.post("/api/transactions", json=_txn(first["id"])).json()
    b = client.post("/api/transactions", json=_txn(first["id"], amount=150)).json()
    client.post("/api/transactions", json=_txn(second["id"]))

    r = client.get(f"/api/transactions/property/{first['id']}")
    assert r.status_code == 200
    assert sorted(t["id"] for t in r.json()) == sorted([a["id"], b["id"]])


def test_transactions_by_property_without_matches(client, make_property):
    prop = make_property()
    r = client.get(f"/api/transactions/property/{prop['id']}")
    assert error_of(r) == ("NotFound", f"No transactions found for property {prop['id']}")


def test_deleting_property_keeps_its_transactions(client, make_property):
    # No cascading delete: dependent transactions stay readable.
    prop = make_property()
    txn = client.post("/api/transactions", json=_txn(prop["id"])).json()

    assert client.delete(f"/api/properties/{prop['id']}").status_code == 200

    r = client.get(f"/api/transactions/property/{prop['id']}")
    assert r.status_code == 200
    assert [t["id"] for t in r.json()] == [txn["id"]]
