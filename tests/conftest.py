import httpx
import pytest
from fastapi.testclient import TestClient

from tiktok_relay.core.config import Settings
from tiktok_relay.main import create_app


class FakeUpstream:
    """Stands in for the extraction API. Records every request it sees."""

    def __init__(self):
        self.requests = []
        self.responder = lambda request: httpx.Response(200, json={"status": False})

    def reply(self, status_code=200, **kwargs):
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, exc):
        def responder(request):
            raise exc
        self.responder = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture
def settings():
    return Settings(UPSTREAM_URL="https://upstream.test/downloader/tiktok")


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app(settings, upstream):
    return create_app(settings, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(app):
    return TestClient(app)
