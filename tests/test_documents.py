from tests.helpers import error_of


def _document(property_id, **overrides):
    payload = {
        "property_id": property_id,
        "document_type": "inspection_report",
        "content": "Roof and plumbing inspected, no issues.",
        "metadata": {"title": "2024 annual inspection", "tags": ["inspection"]},
    }
    payload.update(overrides)
    return payload


def test_create_document_drops_metadata(client, make_property):
    prop = make_property()
    r = client.post("/api/documents", json=_document(prop["id"]))
    assert r.status_code == 201
    doc = r.json()
    assert set(doc) == {"id", "property_id", "document_type", "content"}
    assert doc["property_id"] == prop["id"]


def test_create_then_get_document(client, make_property):
    doc = client.post("/api/documents", json=_document(make_property()["id"])).json()
    r = client.get(f"/api/documents/{doc['id']}")
    assert r.status_code == 200
    assert r.json() == doc


def test_missing_title_is_invalid(client, make_property):
    payload = _document(make_property()["id"], metadata={"title": "", "tags": []})
    kind, message = error_of(client.post("/api/documents", json=payload))
    assert kind == "InvalidPayload"
    assert "metadata title" in message


def test_missing_content_is_invalid(client, make_property):
    payload = _document(make_property()["id"], content="")
    assert error_of(client.post("/api/documents", json=payload))[0] == "InvalidPayload"


def test_unknown_property_is_not_found(client):
    r = client.post("/api/documents", json=_document("void"))
    assert error_of(r) == ("NotFound", "Property not found")


def test_get_all_documents(client, make_property):
    assert error_of(client.get("/api/documents")) == ("NotFound", "No documents found")
    prop = make_property()
    client.post("/api/documents", json=_document(prop["id"]))
    client.post("/api/documents", json=_document(prop["id"], document_type="lease_copy"))
    assert len(client.get("/api/documents").json()) == 2


def test_update_document(client, make_property):
    doc = client.post("/api/documents", json=_document(make_property()["id"])).json()
    r = client.put(
        f"/api/documents/{doc['id']}",
        json={"content": "Updated findings", "metadata": {"title": "Revised"}},
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["content"] == "Updated findings"
    assert updated["document_type"] == doc["document_type"]
    assert "metadata" not in updated


def test_update_missing_document(client):
    r = client.put("/api/documents/none", json={"content": "x"})
    assert error_of(r) == ("NotFound", "Document with ID none not found")


def test_delete_document(client, make_property):
    doc = client.post("/api/documents", json=_document(make_property()["id"])).json()
    assert client.delete(f"/api/documents/{doc['id']}").status_code == 200
    assert client.get(f"/api/documents/{doc['id']}").status_code == 404
    assert error_of(client.delete(f"/api/documents/{doc['id']}"))[0] == "NotFound"
