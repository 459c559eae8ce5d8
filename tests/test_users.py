import pytest


@pytest.fixture
def registered(empty_client):
    res = empty_client.post(
        "/api/users",
        json={"username": "jane", "password": "correct-horse", "fullName": "Jane Doe"},
    )
    assert res.status_code == 201
    return res.json()


def login(client, password="correct-horse"):
    return client.post("/api/auth/login", json={"username": "jane", "password": password})


def test_register_hides_password(registered):
    assert registered["username"] == "jane"
    assert registered["role"] == "client"
    assert "password" not in registered
    assert "passwordHash" not in registered


def test_duplicate_username_conflicts(empty_client, registered):
    res = empty_client.post("/api/users", json={"username": "jane", "password": "another-one"})
    assert res.status_code == 409


def test_short_password_is_rejected(empty_client):
    assert empty_client.post("/api/users", json={"username": "sam", "password": "short"}).status_code == 422


def test_login_and_me(empty_client, registered):
    res = login(empty_client)
    assert res.status_code == 200
    body = res.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["id"] == registered["id"]

    me = empty_client.get("/api/users/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["fullName"] == "Jane Doe"


def test_wrong_password(empty_client, registered):
    assert login(empty_client, "wrong-password").status_code == 401


def test_me_requires_valid_token(empty_client, registered):
    assert empty_client.get("/api/users/me").status_code == 401
    res = empty_client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401


def test_update_me_changes_password(empty_client, registered):
    token = login(empty_client).json()["accessToken"]
    headers = {"Authorization": f"Bearer {token}"}

    res = empty_client.patch(
        "/api/users/me", json={"phone": "0400000000", "password": "new-password"}, headers=headers
    )
    assert res.status_code == 200
    assert res.json()["phone"] == "0400000000"

    assert login(empty_client).status_code == 401
    assert login(empty_client, "new-password").status_code == 200


def test_get_user_by_id(empty_client, registered):
    assert empty_client.get(f"/api/users/{registered['id']}").json()["username"] == "jane"
    assert empty_client.get("/api/users/99").status_code == 404


def test_registration_always_creates_a_client(empty_client):
    res = empty_client.post(
        "/api/users",
        json={"username": "mallory", "password": "correct-horse", "role": "admin"},
    )

    assert res.status_code == 201
    assert res.json()["role"] == "client"
    assert empty_client.get(f"/api/users/{res.json()['id']}").json()["role"] == "client"
