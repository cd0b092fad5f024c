from conftest import signup

TENANT = {
    "first_name": "Maria",
    "last_name": "Santos",
    "email": "maria@example.com",
    "phone": "09171234567",
    "emergency_contact": {"name": "Jose Santos", "phone": "09181234567", "relationship": "Father"},
}


def setup_property(client):
    signup(client)
    property_id = client.post(
        "/properties", json={"name": "Sunset Residences", "address": "12 Mango St"}
    ).json()["data"]["id"]
    unit_id = client.post(
        f"/properties/{property_id}/units",
        json={
            "unit_number": "101",
            "monthly_rent": "15000",
            "deposit_required": "15000",
            "advance_required": "15000",
        },
    ).json()["data"]["id"]
    return property_id, unit_id


def create_tenant(client, property_id, **overrides):
    response = client.post("/tenants", json={**TENANT, "property_id": property_id, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_tenant_crud(client):
    property_id, _ = setup_property(client)
    tenant = create_tenant(client, property_id)
    assert tenant["emergency_contact"]["relationship"] == "Father"

    listed = client.get("/tenants").json()["data"]
    assert listed[0]["property_name"] == "Sunset Residences"
    assert listed[0]["active_lease_count"] == 0

    updated = client.put(f"/tenants/{tenant['id']}", json={"phone": "09990000000"})
    assert updated.json()["data"]["phone"] == "09990000000"
    assert updated.json()["data"]["email"] == "maria@example.com"

    assert client.delete(f"/tenants/{tenant['id']}").status_code == 204
    assert client.get(f"/tenants/{tenant['id']}").status_code == 404


def test_tenant_email_is_unique_per_owner(client):
    property_id, _ = setup_property(client)
    create_tenant(client, property_id)
    response = client.post(
        "/tenants", json={**TENANT, "property_id": property_id, "email": "MARIA@example.com"}
    )
    assert response.status_code == 409


def test_tenant_search(client):
    property_id, _ = setup_property(client)
    create_tenant(client, property_id)
    create_tenant(client, property_id, first_name="Juan", last_name="Cruz", email="juan@example.com")

    found = client.get("/tenants", params={"search": "cruz"}).json()["data"]
    assert [t["first_name"] for t in found] == ["Juan"]


def test_tenant_with_active_lease_cannot_be_deleted(client):
    property_id, unit_id = setup_property(client)
    tenant = create_tenant(client, property_id)
    lease = client.post(
        "/leases",
        json={
            "unit_id": unit_id,
            "tenant_id": tenant["id"],
            "start_date": "2024-01-01",
            "end_date": "2024-12-31",
            "monthly_rent": "15000",
            "deposit_paid": "15000",
            "advance_paid": "15000",
            "due_date": 5,
        },
    ).json()["data"]

    assert client.get("/tenants").json()["data"][0]["active_lease_count"] == 1
    assert client.delete(f"/tenants/{tenant['id']}").status_code == 409

    client.post(f"/leases/{lease['id']}/terminate", json={"termination_date": "2024-06-30"})
    assert client.delete(f"/tenants/{tenant['id']}").status_code == 204


def test_tenant_for_foreign_property_is_rejected(client):
    property_id, _ = setup_property(client)
    client.post("/auth/signout")
    signup(client, email="rival@example.com", name="Rita Rival")
    response = client.post("/tenants", json={**TENANT, "property_id": property_id})
    assert response.status_code == 404


def test_null_for_required_tenant_field_is_bad_request(client):
    property_id, _ = setup_property(client)
    tenant = create_tenant(client, property_id)

    response = client.put(f"/tenants/{tenant['id']}", json={"email": None})
    assert response.status_code == 400
    assert response.json()["message"] == "email cannot be null"

    cleared = client.put(f"/tenants/{tenant['id']}", json={"emergency_contact": None})
    assert cleared.status_code == 200
    assert cleared.json()["data"]["emergency_contact"] is None
    assert cleared.json()["data"]["email"] == "maria@example.com"
