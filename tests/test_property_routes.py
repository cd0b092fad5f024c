from conftest import signup

UNIT = {
    "unit_number": "101",
    "monthly_rent": "15000",
    "deposit_required": "15000",
    "advance_required": "15000",
    "bedrooms": 2,
    "bathrooms": 1,
}


def create_property(client, name="Sunset Residences"):
    response = client.post(
        "/properties",
        json={"name": name, "address": "12 Mango St, Cebu", "amenities": ["wifi", "parking"]},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_property_crud(client):
    signup(client)
    created = create_property(client)
    assert created["amenities"] == ["wifi", "parking"]

    listed = client.get("/properties").json()["data"]
    assert [p["id"] for p in listed] == [created["id"]]

    updated = client.put(f"/properties/{created['id']}", json={"name": "Sunrise Residences"})
    assert updated.json()["data"]["name"] == "Sunrise Residences"
    assert updated.json()["data"]["address"] == "12 Mango St, Cebu"

    assert client.delete(f"/properties/{created['id']}").status_code == 204
    assert client.get(f"/properties/{created['id']}").status_code == 404


def test_units_start_available_and_money_is_decimal_string(client):
    signup(client)
    property_id = create_property(client)["id"]

    response = client.post(f"/properties/{property_id}/units", json=UNIT)
    assert response.status_code == 201
    unit = response.json()["data"]
    assert unit["is_available"] is True
    assert unit["monthly_rent"] == "15000.00"

    detail = client.get(f"/properties/{property_id}").json()["data"]
    assert [u["unit_number"] for u in detail["units"]] == ["101"]

    vacant = client.get("/units", params={"is_available": True}).json()["data"]
    assert [u["id"] for u in vacant] == [unit["id"]]
    assert client.get("/units", params={"is_available": False}).json()["data"] == []


def test_unit_update_ignores_availability(client):
    signup(client)
    property_id = create_property(client)["id"]
    unit = client.post(f"/properties/{property_id}/units", json=UNIT).json()["data"]

    response = client.put(
        f"/units/{unit['id']}", json={"monthly_rent": "16000", "is_available": False}
    )
    assert response.status_code == 200
    assert response.json()["data"]["monthly_rent"] == "16000.00"
    assert response.json()["data"]["is_available"] is True


def test_other_owners_property_looks_missing(client):
    signup(client)
    property_id = create_property(client)["id"]
    client.post("/auth/signout")

    signup(client, email="rival@example.com", name="Rita Rival")
    response = client.get(f"/properties/{property_id}")
    assert response.status_code == 404
    assert response.json()["message"] == "Property not found or unauthorized"
    assert client.post(f"/properties/{property_id}/units", json=UNIT).status_code == 404
    assert client.get("/properties").json()["data"] == []


def test_null_for_required_unit_field_is_bad_request(client):
    signup(client)
    property_id = create_property(client)["id"]
    unit = client.post(f"/properties/{property_id}/units", json=UNIT).json()["data"]

    response = client.put(f"/units/{unit['id']}", json={"unit_number": None})
    assert response.status_code == 400
    assert response.json()["message"] == "unit_number cannot be null"

    assert client.put(f"/units/{unit['id']}", json={"monthly_rent": None}).status_code == 400
    assert client.get(f"/units/{unit['id']}").json()["data"]["unit_number"] == "101"


def test_null_for_required_property_field_is_bad_request(client):
    signup(client)
    property_id = create_property(client)["id"]

    response = client.put(f"/properties/{property_id}", json={"name": None})
    assert response.status_code == 400
    assert response.json()["message"] == "name cannot be null"

    # optional columns may still be cleared
    cleared = client.put(f"/properties/{property_id}", json={"description": None})
    assert cleared.status_code == 200
    assert cleared.json()["data"]["name"] == "Sunset Residences"
