import pytest
import requests

from relay_chat.client import api
from relay_chat.client import main as status_main


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


PAYLOADS = {
    "/health": {"status": "OK", "connectedUsers": 1, "totalMessages": 2},
    "/users": [{"id": "abc", "fullName": "Alice"}],
    "/messages": [
        {
            "id": "1",
            "type": "system",
            "content": "Alice joined the chat",
            "timestamp": "2024-05-01T12:00:00.000Z",
            "sender": "System",
        },
        {
            "id": "2",
            "type": "user",
            "content": "hi",
            "timestamp": "2024-05-01T12:00:01.000Z",
            "sender": "Alice",
            "senderId": "abc",
        },
    ],
}


def _fake_get(calls):
    def fake_get(url, timeout):
        calls.append((url, timeout))
        path = url.split("localhost:3000", 1)[1]
        return FakeResponse(PAYLOADS[path])

    return fake_get


def test_status_client_requests(monkeypatch):
    calls = []
    monkeypatch.setattr(api.requests, "get", _fake_get(calls))
    client = api.StatusClient("http://localhost:3000/")
    assert client.health()["connectedUsers"] == 1
    assert client.list_users() == PAYLOADS["/users"]
    assert client.get_messages() == PAYLOADS["/messages"]
    assert calls == [
        ("http://localhost:3000/health", 10),
        ("http://localhost:3000/users", 10),
        ("http://localhost:3000/messages", 10),
    ]


def test_status_client_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(api.requests, "get", lambda url, timeout: FakeResponse({}, 500))
    client = api.StatusClient("http://localhost:3000")
    with pytest.raises(requests.HTTPError):
        client.health()


def test_main_prints_status(monkeypatch, capsys):
    monkeypatch.setattr(api.requests, "get", _fake_get([]))
    assert status_main.main(["http://localhost:3000"]) == 0
    out = capsys.readouterr().out
    assert "Server status: OK" in out
    assert "  - Alice" in out
    assert "* Alice joined the chat" in out
    assert "Alice: hi" in out


def test_main_reports_unreachable_server(monkeypatch, capsys):
    def refuse(url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(api.requests, "get", refuse)
    assert status_main.main([]) == 1
    assert "Could not reach http://localhost:3000" in capsys.readouterr().err
