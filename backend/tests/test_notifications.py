from uuid import uuid4

import pytest


@pytest.fixture
def two_notifications(client, alice, bob):
    """Bob comments on and likes Alice's post."""
    _, alice_headers = alice
    _, bob_headers = bob
    post = client.post("/api/posts/", headers=alice_headers, json={"content": "Hi"}).json()["data"]
    client.post("/api/comments/", headers=bob_headers, json={"content": "Hey", "postId": post["id"]})
    client.post(f"/api/likes/post/{post['id']}", headers=bob_headers)


def test_list_notifications(client, alice, two_notifications):
    alice_user, headers = alice
    response = client.get("/api/notifications/", headers=headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [n["type"] for n in data["notifications"]] == ["POST_LIKE", "COMMENT"]
    assert all(n["userId"] == alice_user["id"] for n in data["notifications"])
    assert data["unreadCount"] == 2
    assert data["pagination"] == {"page": 1, "limit": 20, "totalPages": 1, "totalItems": 2}


def test_mark_one_as_read(client, alice, two_notifications):
    _, headers = alice
    notification = client.get("/api/notifications/", headers=headers).json()["data"]["notifications"][0]

    response = client.patch(f"/api/notifications/{notification['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"]["isRead"] is True
    assert client.get("/api/notifications/", headers=headers).json()["data"]["unreadCount"] == 1


def test_cannot_mark_someone_elses_notification(client, alice, bob, two_notifications):
    _, alice_headers = alice
    _, bob_headers = bob
    notification = client.get("/api/notifications/", headers=alice_headers).json()["data"]["notifications"][0]

    response = client.patch(f"/api/notifications/{notification['id']}", headers=bob_headers)

    assert response.status_code == 403
    assert response.json()["error"]["type"] == "FORBIDDEN"


def test_mark_missing_notification(client, alice):
    _, headers = alice
    response = client.patch(f"/api/notifications/{uuid4()}", headers=headers)

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Notification not found"


def test_mark_all_as_read(client, alice, bob, two_notifications):
    _, alice_headers = alice
    _, bob_headers = bob

    response = client.patch("/api/notifications/read/all", headers=alice_headers)

    assert response.status_code == 200
    assert response.json()["data"] == {"updatedCount": 2}
    assert client.get("/api/notifications/", headers=alice_headers).json()["data"]["unreadCount"] == 0

    again = client.patch("/api/notifications/read/all", headers=alice_headers)
    assert again.json()["data"] == {"updatedCount": 0}
    # Other users' notifications are untouched
    assert client.patch("/api/notifications/read/all", headers=bob_headers).json()["data"] == {"updatedCount": 0}


def test_list_notifications_with_huge_page_number(client, alice, two_notifications):
    _, headers = alice

    response = client.get("/api/notifications/?page=9999999999999999999", headers=headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["notifications"] == []
    assert data["unreadCount"] == 2
    assert data["pagination"]["totalItems"] == 2
