"""
Shared test fixtures: in-memory database, API client and record factories.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Configure test environment BEFORE importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("DB_SERVER", None)

from database import SessionLocal, drop_db, init_db
from main import app


PROPERTY_PAYLOAD = {
    "address": "12 Harbor View, Cebu City",
    "valuation": 350000,
    "status": "available",
    "square_footage": 1200,
    "bedrooms": 3,
    "bathrooms": 2,
    "amenities": ["parking", "pool"],
    "images": ["front.jpg"],
    "property_type": "residential",
    "insurance_info": "Policy 42-A",
    "tax_details": {
        "annual_amount": 4200,
        "last_paid_date": "2024-01-15",
        "next_due_date": "2025-01-15",
    },
}

TENANT_PAYLOAD = {
    "name": "Maria Santos",
    "email": "maria@example.com",
    "phone": "+63 917 555 0101",
    "emergency_contact": "Jose Santos",
    "background_check_status": "cleared",
    "credit_score": 720,
    "rental_history": [
        {
            "previous_address": "8 Mango Ave",
            "landlord_contact": "landlord@example.com",
            "duration": "2 years",
        }
    ],
    "payment_preferences": "bank transfer",
}


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table before each test."""
    drop_db()
    init_db()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_property(client):
    def _make(**overrides):
        payload = {**PROPERTY_PAYLOAD, **overrides}
        r = client.post("/api/properties", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest.fixture
def make_tenant(client):
    def _make(**overrides):
        payload = {**TENANT_PAYLOAD, **overrides}
        r = client.post("/api/tenants", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest.fixture
def make_lease(client, make_property, make_tenant):
    def _make(**overrides):
        payload = {
            "property_id": overrides.pop("property_id", None) or make_property()["id"],
            "tenant": overrides.pop("tenant", None) or make_tenant()["id"],
            "rent": 2000,
            "start_date": "2024-01-01",
            "end_date": "2024-12-31",
            "digital_signature": "signed:maria",
            "security_deposit": 4000,
            "utility_responsibilities": ["electricity"],
            "renewal_status": "pending",
        }
        payload.update(overrides)
        r = client.post("/api/leases", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
