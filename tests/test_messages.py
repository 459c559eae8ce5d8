import asyncio
from types import SimpleNamespace
import pytest
from app.routes.message_route import messages_socket
from app.utils.broadcast import ConnectionManager


class RecordingSocket:
    def __init__(self):
        self.sent = []

    async def accept(self):
        pass

    async def send_json(self, payload):
        self.sent.append(payload)


class BrokenSocket(RecordingSocket):
    async def send_json(self, payload):
        raise RuntimeError("socket closed")


def test_create_message_sets_status_and_timestamp(client):
    res = client.post(
        "/api/messages",
        json={
            "senderId": 1,
            "receiverId": 2,
            "content": "Your appointment is confirmed",
            "status": "read",
            "timestamp": "2000-01-01T00:00:00Z",
            "metadata": {"bookingId": 7},
        },
    )

    assert res.status_code == 201
    message = res.json()
    assert message["status"] == "sent"
    assert message["channel"] == "sms"
    assert not message["timestamp"].startswith("2000")
    assert message["metadata"] == {"bookingId": 7}


def test_message_requires_content(client):
    assert client.post("/api/messages", json={"receiverId": 2}).status_code == 422
    assert client.post("/api/messages", json={"content": "hi", "channel": "fax"}).status_code == 422


def test_filter_by_sender_and_receiver(client):
    client.post("/api/messages", json={"senderId": 1, "receiverId": 2, "content": "a"})
    client.post("/api/messages", json={"senderId": 2, "receiverId": 1, "content": "b"})
    client.post("/api/messages", json={"receiverId": 2, "content": "c", "channel": "ai"})

    assert [m["content"] for m in client.get("/api/messages").json()] == ["a", "b", "c"]
    assert [m["content"] for m in client.get("/api/messages/sender/2").json()] == ["b"]
    assert [m["content"] for m in client.get("/api/messages/receiver/2").json()] == ["a", "c"]


def test_update_message_status(client):
    client.post("/api/messages", json={"content": "hello"})

    res = client.patch("/api/messages/1/status", json={"status": "delivered"})
    assert res.status_code == 200
    assert res.json()["status"] == "delivered"

    assert client.patch("/api/messages/1/status", json={"status": "lost"}).status_code == 422
    assert client.patch("/api/messages/2/status", json={"status": "read"}).status_code == 404


def test_websocket_welcome_and_echo(client):
    with client.websocket_connect("/ws") as websocket:
        welcome = websocket.receive_json()
        assert welcome == {
            "type": "connection_established",
            "message": "Connected to messaging server",
        }

        websocket.send_text("ping")
        assert websocket.receive_json() == {"type": "message_received", "data": "ping"}


def test_new_messages_are_pushed_to_sockets(client):
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        res = client.post("/api/messages", json={"receiverId": 2, "content": "hi"})
        event = websocket.receive_json()

    assert event["type"] == "new_message"
    assert event["message"]["id"] == res.json()["id"]
    assert event["message"]["content"] == "hi"


def test_failed_push_does_not_undo_message(client):
    client.app.state.broadcaster.active_connections.append(BrokenSocket())

    res = client.post("/api/messages", json={"content": "still saved"})

    assert res.status_code == 201
    assert [m["content"] for m in client.get("/api/messages").json()] == ["still saved"]
    assert client.app.state.broadcaster.active_connections == []


def test_broadcast_drops_failing_sockets():
    manager = ConnectionManager()
    healthy, broken = RecordingSocket(), BrokenSocket()
    asyncio.run(manager.connect(healthy))
    asyncio.run(manager.connect(broken))

    delivered = asyncio.run(manager.broadcast({"type": "new_message"}))

    assert delivered == 1
    assert healthy.sent == [{"type": "new_message"}]
    assert manager.active_connections == [healthy]


def test_disconnect_unknown_socket_is_ignored():
    manager = ConnectionManager()
    manager.disconnect(RecordingSocket())
    assert manager.active_connections == []


class ResettingSocket(RecordingSocket):
    def __init__(self, manager):
        super().__init__()
        self.app = SimpleNamespace(state=SimpleNamespace(broadcaster=manager))

    async def receive_text(self):
        raise RuntimeError("connection reset")


def test_socket_is_released_after_receive_error():
    manager = ConnectionManager()
    websocket = ResettingSocket(manager)

    with pytest.raises(RuntimeError):
        asyncio.run(messages_socket(websocket))

    assert websocket.sent[0]["type"] == "connection_established"
    assert manager.active_connections == []
