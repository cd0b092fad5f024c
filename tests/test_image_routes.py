import os

import pytest

from landra.routes import image_routes

from conftest import signup


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(image_routes.image_service, "upload_dir", str(tmp_path))
    return tmp_path


def create_property(client):
    return client.post(
        "/properties", json={"name": "Sunset Residences", "address": "12 Mango St"}
    ).json()["data"]["id"]


def test_upload_and_delete_property_image(client, upload_dir):
    signup(client)
    property_id = create_property(client)

    response = client.post(
        f"/images/property/{property_id}",
        files={"file": ("front.png", b"\x89PNG fake image bytes", "image/png")},
    )
    assert response.status_code == 201, response.text
    image = response.json()["data"]
    assert image["filename"] == "front.png"
    assert image["url"].endswith(".png")
    assert "image_path" not in image

    stored = list((upload_dir / str(property_id)).iterdir())
    assert len(stored) == 1

    detail = client.get(f"/properties/{property_id}").json()["data"]
    assert [i["id"] for i in detail["images"]] == [image["id"]]

    assert client.delete(f"/images/property/image/{image['id']}").status_code == 204
    assert not os.path.exists(stored[0])


def test_upload_rejects_non_images(client, upload_dir):
    signup(client)
    property_id = create_property(client)
    response = client.post(
        f"/images/property/{property_id}",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert "Invalid file type" in response.json()["message"]


def test_upload_to_foreign_property_is_not_found(client, upload_dir):
    signup(client)
    property_id = create_property(client)
    client.post("/auth/signout")
    signup(client, email="rival@example.com", name="Rita Rival")
    response = client.post(
        f"/images/property/{property_id}",
        files={"file": ("front.png", b"\x89PNG", "image/png")},
    )
    assert response.status_code == 404
