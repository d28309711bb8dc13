from tests.conftest import TENANT_PAYLOAD
from tests.helpers import error_of


def test_create_tenant(client):
    r = client.post("/api/tenants", json=TENANT_PAYLOAD)
    assert r.status_code == 201
    tenant = r.json()
    assert tenant["id"]
    assert tenant["credit_score"] == 720
    assert tenant["rental_history"][0]["duration"] == "2 years"


def test_create_then_get_tenant(client, make_tenant):
    tenant = make_tenant()
    r = client.get(f"/api/tenants/{tenant['id']}")
    assert r.status_code == 200
    assert r.json() == tenant


def test_zero_credit_score_counts_as_missing(client):
    r = client.post("/api/tenants", json={**TENANT_PAYLOAD, "credit_score": 0})
    assert r.status_code == 400
    kind, message = error_of(r)
    assert kind == "InvalidPayload"
    assert "credit score" in message


def test_missing_email_is_invalid(client):
    payload = {k: v for k, v in TENANT_PAYLOAD.items() if k != "email"}
    assert error_of(client.post("/api/tenants", json=payload))[0] == "InvalidPayload"


def test_emergency_contact_is_optional(client):
    r = client.post("/api/tenants", json={**TENANT_PAYLOAD, "emergency_contact": ""})
    assert r.status_code == 201


def test_get_all_tenants(client, make_tenant):
    assert error_of(client.get("/api/tenants")) == ("NotFound", "No tenants found")
    make_tenant()
    make_tenant(name="Ana Cruz", email="ana@example.com")
    r = client.get("/api/tenants")
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_get_missing_tenant(client):
    r = client.get("/api/tenants/ghost")
    assert r.status_code == 404
    assert error_of(r) == ("NotFound", "Tenant with ID ghost not found")


def test_tenants_expose_no_update_or_delete(client, make_tenant):
    tenant = make_tenant()
    assert client.put(f"/api/tenants/{tenant['id']}", json=TENANT_PAYLOAD).status_code == 405
    assert client.delete(f"/api/tenants/{tenant['id']}").status_code == 405


def test_incomplete_rental_history_entry_is_invalid(client):
    r = client.post("/api/tenants", json={**TENANT_PAYLOAD, "rental_history": [{}]})
    assert r.status_code == 400
    kind, message = error_of(r)
    assert kind == "InvalidPayload"
    assert "previous_address" in message
    assert client.get("/api/tenants").status_code == 404


def test_rental_history_entry_missing_duration_is_invalid(client):
    entry = {"previous_address": "8 Mango Ave", "landlord_contact": "landlord@example.com"}
    r = client.post("/api/tenants", json={**TENANT_PAYLOAD, "rental_history": [entry]})
    assert error_of(r)[0] == "InvalidPayload"


def test_overlong_name_is_invalid_payload(client):
    r = client.post("/api/tenants", json={**TENANT_PAYLOAD, "name": "n" * 201})
    assert r.status_code == 400
    assert error_of(r)[0] == "InvalidPayload"
