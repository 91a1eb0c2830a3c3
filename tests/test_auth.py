SIGNUP = {
    "fullName": "Riley Quinn",
    "email": "Riley@QuinnGrocers.com",
    "password": "correct-horse-1",
}


def signup(auth_client, **overrides):
    return auth_client.post("/api/auth/signup", json={**SIGNUP, **overrides})


def test_signup_returns_token(auth_client):
    response = signup(auth_client)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "riley@quinngrocers.com"
    assert body["user"]["full_name"] == "Riley Quinn"
    assert "password" not in body["user"]


def test_signup_rejects_duplicate_email(auth_client):
    signup(auth_client)
    response = signup(auth_client, email="riley@quinngrocers.com")
    assert response.status_code == 409


def test_signup_validates_input(auth_client):
    response = signup(auth_client, email="nope", password="short")
    assert response.status_code == 400
    assert set(response.json()["data"]) == {"email", "password"}


def test_login_and_me(auth_client):
    signup(auth_client)

    response = auth_client.post("/api/auth/login", json={
        "email": "riley@quinngrocers.com", "password": "correct-horse-1",
    })
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]

    me = auth_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["full_name"] == "Riley Quinn"


def test_login_with_wrong_password(auth_client):
    signup(auth_client)

    response = auth_client.post("/api/auth/login", json={
        "email": "riley@quinngrocers.com", "password": "wrong-password",
    })
    assert response.status_code == 401
    assert response.json()["status_code"] == "3005"


def test_me_requires_token(auth_client):
    assert auth_client.get("/api/auth/me").status_code == 401


def test_change_password(auth_client):
    token = signup(auth_client).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    wrong = auth_client.post("/api/auth/change-password", json={
        "currentPassword": "not-it-at-all", "newPassword": "battery-staple-2",
    }, headers=headers)
    assert wrong.status_code == 401

    response = auth_client.post("/api/auth/change-password", json={
        "currentPassword": "correct-horse-1", "newPassword": "battery-staple-2",
    }, headers=headers)
    assert response.status_code == 200, response.text

    old = auth_client.post("/api/auth/login", json={
        "email": "riley@quinngrocers.com", "password": "correct-horse-1",
    })
    assert old.status_code == 401
    new = auth_client.post("/api/auth/login", json={
        "email": "riley@quinngrocers.com", "password": "battery-staple-2",
    })
    assert new.status_code == 200


def test_token_from_signup_works_on_inventory_service(auth_client, client):
    token = signup(auth_client).json()["access_token"]

    response = client.get("/api/inventory/items", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json() == {"items": [], "total": 0}


def test_health(auth_client):
    assert auth_client.get("/api/auth/health").json() == {"status": "healthy"}
