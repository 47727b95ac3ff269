"""
Shared fixtures: an in-memory fake of the Blog API served through
httpx.MockTransport, so no test touches the network.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blog_api.http import HttpClient, set_client


BASE_URL = "https://api.test"

# Wire field used to filter each collection in GET queries
FILTERS = {
    "posts": "userId",
    "comments": "postId",
    "users": "email",
}


def _seed() -> Dict[str, List[Dict[str, Any]]]:
    return {
        "posts": [
            {"id": 1, "userId": 1, "title": "first", "body": "one"},
            {"id": 2, "userId": 1, "title": "second", "body": "two"},
            {"id": 3, "userId": 2, "title": "third", "body": "three"},
        ],
        "comments": [
            {"id": 1, "postId": 1, "name": "a", "email": "a@x.com", "body": "nice"},
            {"id": 2, "postId": 1, "name": "b", "email": "b@x.com", "body": "meh"},
            {"id": 3, "postId": 3, "name": "c", "email": "c@x.com", "body": "ok"},
        ],
        "users": [
            {
                "id": 1,
                "name": "Leanne Graham",
                "username": "Bret",
                "email": "Sincere@april.biz",
                "phone": "1-770-736-8031 x56442",
                "website": "hildegard.org",
                "address": {"city": "Gwenborough"},
            },
            {
                "id": 2,
                "name": "Ervin Howell",
                "username": "Antonette",
                "email": "Shanna@melissa.tv",
            },
        ],
    }


class FakeBlogServer:
    """
    Minimal JSONPlaceholder stand-in.

    Set `fail_status` to answer every request with that HTTP status,
    or `fail_connect` to raise a connection error instead.
    """

    def __init__(self):
        self.data = _seed()
        self.requests: List[httpx.Request] = []
        self.fail_status: Optional[int] = None
        self.fail_connect = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_connect:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"error": "boom"})

        parts = request.url.path.strip("/").split("/")
        resource = parts[0]
        if resource not in self.data:
            return httpx.Response(404, json={})
        items = self.data[resource]
        item_id = int(parts[1]) if len(parts) > 1 else None

        if request.method == "GET" and item_id is None:
            key = FILTERS[resource]
            if key in request.url.params:
                wanted = request.url.params[key]
                items = [i for i in items if str(i.get(key)) == wanted]
            return httpx.Response(200, json=items)

        if request.method == "POST":
            payload = json.loads(request.content)
            created = {**payload, "id": max(i["id"] for i in items) + 1}
            items.append(created)
            return httpx.Response(201, json=created)

        existing = next((i for i in items if i["id"] == item_id), None)
        if existing is None:
            return httpx.Response(404, json={})

        if request.method == "PATCH":
            existing.update(json.loads(request.content))
            return httpx.Response(200, json=existing)

        if request.method == "DELETE":
            items.remove(existing)
            return httpx.Response(200, json={})

        return httpx.Response(200, json=existing)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server():
    """Create a fresh fake server."""
    return FakeBlogServer()


@pytest.fixture
def client(server):
    """HttpClient wired to the fake server."""
    return HttpClient(base_url=BASE_URL, transport=httpx.MockTransport(server.handler))


@pytest.fixture
def shared_client(client):
    """Install the fake-backed client as the process-wide shared client."""
    set_client(client)
    yield client
    set_client(None)


@pytest.fixture
def error_records(caplog):
    """Callable returning the ERROR records emitted by blog_api loggers."""
    def collect() -> list:
        return [
            r for r in caplog.records
            if r.levelno >= logging.ERROR and r.name.startswith("blog_api")
        ]
    return collect
