"""Tests for the /health endpoint."""

from datetime import datetime


def test_health_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["uptime"] >= 0
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_uptime_never_decreases(client):
    uptimes = [client.get("/health").json()["uptime"] for _ in range(5)]
    assert uptimes == sorted(uptimes)


def test_health_makes_no_upstream_call(client, upstream):
    client.get("/health")
    assert upstream.requests == []
