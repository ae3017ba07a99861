from uuid import uuid4


def send_request(client, headers, user_id):
    return client.post("/api/friends/requests", headers=headers, json={"userId": user_id})


def test_send_friend_request(client, alice, bob, notifications_of):
    alice_user, alice_headers = alice
    bob_user, bob_headers = bob

    response = send_request(client, alice_headers, bob_user["id"])

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["senderId"] == alice_user["id"]
    assert data["receiverId"] == bob_user["id"]
    assert data["status"] == "PENDING"
    assert data["receiver"]["firstName"] == "Bob"

    notifications = notifications_of(bob_headers)
    assert notifications[0]["type"] == "FRIEND_REQUEST"
    assert notifications[0]["content"] == "Alice Smith sent you a friend request"


def test_cannot_befriend_yourself(client, alice):
    alice_user, headers = alice
    response = send_request(client, headers, alice_user["id"])

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "BAD_REQUEST"


def test_request_to_missing_user(client, alice):
    _, headers = alice
    response = send_request(client, headers, str(uuid4()))

    assert response.status_code == 404


def test_duplicate_request_in_either_direction_conflicts(client, alice, bob):
    alice_user, alice_headers = alice
    bob_user, bob_headers = bob
    send_request(client, alice_headers, bob_user["id"])

    again = send_request(client, alice_headers, bob_user["id"])
    reverse = send_request(client, bob_headers, alice_user["id"])

    assert again.status_code == 409
    assert reverse.status_code == 409
    assert reverse.json()["error"]["type"] == "CONFLICT"


def test_list_requests(client, alice, bob, carol):
    alice_user, alice_headers = alice
    bob_user, bob_headers = bob
    carol_user, carol_headers = carol
    send_request(client, alice_headers, bob_user["id"])
    send_request(client, carol_headers, alice_user["id"])

    response = client.get("/api/friends/requests", headers=alice_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [r["sender"]["id"] for r in data["received"]] == [carol_user["id"]]
    assert [r["receiver"]["id"] for r in data["sent"]] == [bob_user["id"]]


def test_accept_request_makes_friends(client, alice, bob, notifications_of):
    alice_user, alice_headers = alice
    bob_user, bob_headers = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]

    response = client.patch(
        f"/api/friends/requests/{request['id']}", headers=bob_headers, json={"status": "ACCEPTED"}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "ACCEPTED"
    assert data["sender"]["id"] == alice_user["id"]
    assert data["receiver"]["id"] == bob_user["id"]

    alice_friends = client.get("/api/friends/", headers=alice_headers).json()["data"]
    bob_friends = client.get("/api/friends/", headers=bob_headers).json()["data"]
    assert [f["id"] for f in alice_friends] == [bob_user["id"]]
    assert [f["id"] for f in bob_friends] == [alice_user["id"]]
    assert "bio" in alice_friends[0]

    accepted = [n for n in notifications_of(alice_headers) if n["type"] == "FRIEND_REQUEST"]
    assert [n["content"] for n in accepted] == ["Bob Jones accepted your friend request"]


def test_reject_request_does_not_notify(client, alice, bob, notifications_of):
    _, alice_headers = alice
    bob_user, bob_headers = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]

    response = client.patch(
        f"/api/friends/requests/{request['id']}", headers=bob_headers, json={"status": "REJECTED"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "REJECTED"
    assert notifications_of(alice_headers) == []
    assert client.get("/api/friends/", headers=alice_headers).json()["data"] == []
    assert client.get("/api/friends/requests", headers=bob_headers).json()["data"]["received"] == []


def test_only_receiver_can_respond(client, alice, bob):
    _, alice_headers = alice
    bob_user, _ = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]

    response = client.patch(
        f"/api/friends/requests/{request['id']}", headers=alice_headers, json={"status": "ACCEPTED"}
    )

    assert response.status_code == 403


def test_responding_twice_conflicts(client, alice, bob):
    _, alice_headers = alice
    bob_user, bob_headers = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]
    url = f"/api/friends/requests/{request['id']}"
    client.patch(url, headers=bob_headers, json={"status": "ACCEPTED"})

    response = client.patch(url, headers=bob_headers, json={"status": "REJECTED"})

    assert response.status_code == 409
    assert response.json()["error"]["type"] == "CONFLICT"


def test_respond_with_invalid_status(client, alice, bob):
    _, alice_headers = alice
    bob_user, bob_headers = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]

    response = client.patch(
        f"/api/friends/requests/{request['id']}", headers=bob_headers, json={"status": "PENDING"}
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"]["status"] == ["Status must be either ACCEPTED or REJECTED"]


def test_respond_to_missing_request(client, alice):
    _, headers = alice
    response = client.patch(f"/api/friends/requests/{uuid4()}", headers=headers, json={"status": "ACCEPTED"})

    assert response.status_code == 404


def test_unfriend(client, alice, bob):
    alice_user, alice_headers = alice
    bob_user, bob_headers = bob
    request = send_request(client, alice_headers, bob_user["id"]).json()["data"]
    client.patch(f"/api/friends/requests/{request['id']}", headers=bob_headers, json={"status": "ACCEPTED"})

    response = client.delete(f"/api/friends/{alice_user['id']}", headers=bob_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/friends/", headers=alice_headers).json()["data"] == []
    # The pair is free to start over
    assert send_request(client, bob_headers, alice_user["id"]).status_code == 201


def test_unfriend_without_relationship(client, alice, bob):
    _, alice_headers = alice
    bob_user, _ = bob

    response = client.delete(f"/api/friends/{bob_user['id']}", headers=alice_headers)

    assert response.status_code == 404
