from landra.config import SESSION_COOKIE_NAME

from conftest import signup


def test_signup_sets_session_cookie(client):
    user = signup(client)
    assert user["email"] == "owner@example.com"
    assert SESSION_COOKIE_NAME in client.cookies

    me = client.get("/auth/me")
    assert me.status_code == 200
    assert me.json()["data"]["name"] == "Olivia Owner"


def test_duplicate_signup_is_a_conflict(client):
    signup(client)
    response = client.post(
        "/auth/signup",
        json={"name": "Other", "email": "OWNER@example.com", "password": "secret123"},
    )
    assert response.status_code == 409
    assert response.json()["error"] == "conflict"


def test_signup_validation_reports_first_field(client):
    response = client.post(
        "/auth/signup", json={"name": "Olivia", "email": "not-an-email", "password": "secret123"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "failure"
    assert body["message"].startswith("email")


def test_signin_and_signout(client):
    signup(client)
    client.post("/auth/signout")
    assert client.get("/auth/me").status_code == 401

    bad = client.post("/auth/signin", json={"email": "owner@example.com", "password": "wrong"})
    assert bad.status_code == 401

    good = client.post("/auth/signin", json={"email": "owner@example.com", "password": "secret123"})
    assert good.status_code == 200
    assert client.get("/auth/me").status_code == 200


def test_protected_routes_require_a_session(client):
    response = client.get("/leases")
    assert response.status_code == 401
    assert response.json() == {
        "status": "failure",
        "message": "Not authenticated",
        "error": "unauthorized",
    }


def test_tampered_session_is_rejected(client):
    response = client.get("/properties", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired session"
