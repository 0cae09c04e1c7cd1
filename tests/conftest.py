"""Shared fixtures: an in-process fake of the HTTP service."""

import json

import httpx
import pytest

from pinecone_rest.client import Pinecone
from pinecone_rest.config import Settings
from pinecone_rest.http.resource_client import ResourceClient

CONTROLLER = "https://api.test.local"
INDEX_HOST = "movies-abc123.svc.test.local"


class FakeServer:
    """Records every request and answers from a table of canned routes.

    Routes are keyed by method and *raw* path (percent-encoding intact, no
    query string).  Unknown routes answer 404.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], object] = {}

    def add(self, method, path, status=200, json_body=None, content=None, raises=None):
        if raises is not None:
            self._routes[(method, path)] = raises
        elif content is not None:
            self._routes[(method, path)] = httpx.Response(status, content=content)
        else:
            self._routes[(method, path)] = httpx.Response(
                status, json=json_body if json_body is not None else {}
            )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode().split("?", 1)[0]
        route = self._routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": f"no route {request.method} {path}"})
        if isinstance(route, Exception):
            raise route
        return httpx.Response(route.status_code, content=route.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self, method, path) -> int:
        return sum(
            1
            for request in self.requests
            if request.method == method
            and request.url.raw_path.decode().split("?", 1)[0] == path
        )


def body_of(request: httpx.Request):
    """Decode a recorded request's JSON body."""
    return json.loads(request.content)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def settings(monkeypatch):
    for name in ("PINECONE_API_KEY", "PINECONE_CONTROLLER_HOST", "PINECONE_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None, pinecone_api_key="test-key")


@pytest.fixture
def controller(server):
    client = ResourceClient(
        CONTROLLER,
        headers={"Api-Key": "test-key", "Content-Type": "application/json"},
        timeout=5,
        transport=server.transport,
    )
    yield client
    client.close()


@pytest.fixture
def data_client(server):
    client = ResourceClient(
        f"https://{INDEX_HOST}",
        headers={"Api-Key": "test-key", "Content-Type": "application/json"},
        timeout=5,
        transport=server.transport,
    )
    yield client
    client.close()


@pytest.fixture
def pc(server, settings):
    client = Pinecone(settings=settings, controller_host=CONTROLLER, transport=server.transport)
    yield client
    client.close()
