from uuid import uuid4


def test_get_me(client, alice):
    user, headers = alice
    response = client.get("/api/users/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["id"] == user["id"]


def test_get_user_profile(client, alice, bob):
    _, headers = alice
    other, _ = bob

    response = client.get(f"/api/users/{other['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["firstName"] == "Bob"


def test_get_unknown_user(client, alice):
    _, headers = alice
    response = client.get(f"/api/users/{uuid4()}", headers=headers)

    assert response.status_code == 404
    assert response.json()["error"] == {"message": "User not found", "type": "NOT_FOUND"}


def test_get_user_with_malformed_id(client, alice):
    _, headers = alice
    response = client.get("/api/users/not-a-uuid", headers=headers)

    assert response.status_code == 422
    assert "user_id" in response.json()["error"]["details"]


def test_update_profile(client, alice):
    _, headers = alice
    response = client.patch(
        "/api/users/me",
        headers=headers,
        json={"bio": "Mathematician", "profilePic": "https://cdn.socialhub.dev/alice.png"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["bio"] == "Mathematician"
    assert data["profilePic"] == "https://cdn.socialhub.dev/alice.png"
    assert data["firstName"] == "Alice"


def test_update_profile_requires_a_field(client, alice):
    _, headers = alice
    response = client.patch("/api/users/me", headers=headers, json={})

    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert ["At least one field must be provided for update"] in details.values()


def test_update_profile_rejects_bad_values(client, alice):
    _, headers = alice
    response = client.patch(
        "/api/users/me",
        headers=headers,
        json={"firstName": "A", "profilePic": "not a url"},
    )

    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert details["firstName"] == ["Name must be at least 2 characters"]
    assert details["profilePic"] == ["Invalid URL"]
