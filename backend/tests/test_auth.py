from datetime import timedelta
from uuid import UUID

from socialhub.core.auth import create_access_token, decode_access_token
from socialhub.models.user import User

PASSWORD = "Secret123"


def test_register_returns_user_and_token(client):
    response = client.post(
        "/api/auth/register",
        json={
            "email": "dana@socialhub.dev",
            "password": PASSWORD,
            "firstName": "Dana",
            "lastName": "O'Neil",
            "dateOfBirth": "1990-04-12",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    user = body["data"]["user"]
    assert user["email"] == "dana@socialhub.dev"
    assert user["firstName"] == "Dana"
    assert user["dateOfBirth"] == "1990-04-12"
    assert "passwordHash" not in user
    assert "password" not in user
    assert decode_access_token(body["data"]["token"]) == UUID(user["id"])


def test_register_duplicate_email_conflicts(client, alice):
    response = client.post(
        "/api/auth/register",
        json={"email": "alice@socialhub.dev", "password": PASSWORD, "firstName": "Other", "lastName": "Alice"},
    )

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "error": {"message": "User with this email already exists", "type": "CONFLICT"},
    }


def test_register_rejects_weak_password(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "weak@socialhub.dev", "password": "alllowercase1", "firstName": "Weak", "lastName": "Pass"},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["type"] == "VALIDATION"
    assert error["details"]["password"] == [
        "Password must contain at least one uppercase letter, one lowercase letter, and one number"
    ]


def test_login_with_valid_credentials(client, alice):
    user, _ = alice
    response = client.post("/api/auth/login", json={"email": "alice@socialhub.dev", "password": PASSWORD})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["id"] == user["id"]
    assert data["token"]


def test_login_with_wrong_password(client, alice):
    response = client.post("/api/auth/login", json={"email": "alice@socialhub.dev", "password": "Wrong1234"})

    assert response.status_code == 401
    assert response.json()["error"] == {"message": "Invalid credentials", "type": "UNAUTHORIZED"}


def test_login_with_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@socialhub.dev", "password": PASSWORD})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid credentials"


def test_protected_route_without_token(client):
    response = client.get("/api/users/me")

    assert response.status_code == 401
    assert response.json()["error"] == {"message": "Authentication required", "type": "UNAUTHORIZED"}


def test_protected_route_with_garbage_token(client):
    response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid token"


def test_protected_route_with_expired_token(client, alice):
    user, _ = alice
    token = create_access_token({"sub": user["id"]}, expires_delta=timedelta(minutes=-5))

    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Token expired"


def test_token_for_deleted_user_is_forbidden(client, database, alice):
    user, headers = alice
    with database.session() as db:
        db.query(User).filter(User.id == UUID(user["id"])).delete()
        db.commit()

    response = client.get("/api/users/me", headers=headers)

    assert response.status_code == 403
    assert response.json()["error"] == {"message": "User no longer exists", "type": "FORBIDDEN"}
