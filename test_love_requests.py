"""
Love requests and gifts
"""

import pytest

from matchmate.models.gift import Gift
from matchmate.models.love_request import LoveRequest
from matchmate.services.relationship_service import RelationshipService
from conftest import auth_headers


@pytest.fixture
def pair(make_user):
    john = make_user()
    jane = make_user(
        firstName="Jane", username="jane", email="jane@example.com", phoneNumber="08022222222",
        gender="female", interestedIn="male",
    )
    return john, jane


def send_request(client, sender, receiver_username):
    return client.post(
        "/api/v1/love-request/send",
        json={"receiverUsername": receiver_username},
        headers=auth_headers(sender),
    )


def test_send_love_request(client, db_session, pair):
    john, jane = pair

    response = send_request(client, john, "jane")

    assert response.status_code == 201
    assert response.json()["message"] == "Love request sent successfully. 💖"
    db_session.expire_all()
    request = db_session.query(LoveRequest).one()
    assert (request.sender_id, request.receiver_id) == (john["id"], jane["id"])


def test_duplicate_love_request_is_rejected(client, pair):
    john, _ = pair
    send_request(client, john, "jane")

    response = send_request(client, john, "jane")

    assert response.status_code == 400
    assert response.json()["message"] == "Love request already sent."


def test_reverse_direction_is_allowed(client, db_session, pair):
    john, jane = pair
    send_request(client, john, "jane")

    response = send_request(client, jane, "john_doe1")

    assert response.status_code == 201
    db_session.expire_all()
    assert db_session.query(LoveRequest).count() == 2


@pytest.mark.parametrize("username", ["john_doe1", "JOHN_DOE1", "  John_Doe1 "])
def test_cannot_send_love_request_to_self(client, pair, username):
    john, _ = pair

    response = send_request(client, john, username)

    assert response.status_code == 400
    assert response.json()["message"] == "You cannot send a love request to yourself."


def test_love_request_unknown_receiver_is_404(client, pair):
    john, _ = pair

    response = send_request(client, john, "nobody")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found."


def test_love_request_requires_receiver(client, pair):
    john, _ = pair

    response = client.post("/api/v1/love-request/send", json={}, headers=auth_headers(john))

    assert response.status_code == 400
    assert response.json()["message"] == "Receiver username is required."


def test_love_request_race_becomes_conflict(client, db_session, pair, monkeypatch):
    john, _ = pair
    send_request(client, john, "jane")
    # Pretend the existence check ran before the first insert landed
    monkeypatch.setattr(RelationshipService, "find_love_request", lambda self, sender_id, receiver_id: None)

    response = send_request(client, john, "jane")

    assert response.status_code == 400
    assert response.json()["message"] == "Love request already sent."
    db_session.expire_all()
    assert db_session.query(LoveRequest).count() == 1


def test_love_request_requires_auth(client, pair):
    response = client.post("/api/v1/love-request/send", json={"receiverUsername": "jane"})

    assert response.status_code == 401


# ---------------------------------------------------------------- gifts

def send_gift(client, sender, **body):
    return client.post("/api/v1/send-gift", json=body, headers=auth_headers(sender))


def test_send_gift(client, pair):
    john, jane = pair

    response = send_gift(client, john, receiverUsername="jane", giftType="rose", message="Hi there")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Gift sent successfully to jane 🎁"
    gift = body["gift"]
    assert gift["senderId"] == john["id"]
    assert gift["receiverId"] == jane["id"]
    assert gift["giftType"] == "rose"
    assert gift["message"] == "Hi there"


def test_repeated_gifts_are_allowed(client, db_session, pair):
    john, _ = pair

    first = send_gift(client, john, receiverUsername="jane", giftType="rose")
    second = send_gift(client, john, receiverUsername="jane", giftType="rose")

    assert first.status_code == second.status_code == 201
    assert second.json()["gift"]["message"] is None
    db_session.expire_all()
    assert db_session.query(Gift).count() == 2


@pytest.mark.parametrize("body", [
    {"giftType": "rose"},
    {"receiverUsername": "jane"},
    {"receiverUsername": "jane", "giftType": "  "},
])
def test_gift_requires_receiver_and_type(client, pair, body):
    john, _ = pair

    response = send_gift(client, john, **body)

    assert response.status_code == 400
    assert response.json()["message"] == "Receiver username and gift type are required."


def test_gift_type_longer_than_column_is_rejected(client, pair):
    john, _ = pair

    response = send_gift(client, john, receiverUsername="jane", giftType="r" * 101)

    assert response.status_code == 400
    assert response.json()["message"] == "Gift type must be at most 100 characters."


def test_gift_unknown_receiver_is_404(client, pair):
    john, _ = pair

    response = send_gift(client, john, receiverUsername="nobody", giftType="rose")

    assert response.status_code == 404
    assert response.json()["message"] == "Receiver not found."


def test_cannot_send_gift_to_self(client, pair):
    john, _ = pair

    response = send_gift(client, john, receiverUsername="John_Doe1", giftType="rose")

    assert response.status_code == 400
    assert response.json()["message"] == "You cannot send a gift to yourself."
