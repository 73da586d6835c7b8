"""
Shared fixtures: an in-process mock of the talks registry.

The registry is an ``aiohttp.web`` application served by ``TestServer`` on
its own event loop in a background thread, so it answers both the async
client tests and the CLI tests, which drive ``asyncio.run`` themselves.
"""

import asyncio
import json
import threading
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer, unused_port


SAMPLE_TALKS = [
    {"id": 1, "name": "A", "type": "z", "desc": "dz", "hidden": False},
    {"id": 2, "name": "B", "type": "a", "desc": "da", "hidden": False},
]


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: Mapping[str, str]
    body: bytes

    def json(self):
        return json.loads(self.body.decode("utf-8"))


@dataclass
class MockRegistry:
    """Canned responses plus a log of everything the client sent."""
    base_url: str = ""
    listing_body: bytes = b"[]"
    listing_status: int = 200
    submit_status: int = 200
    submit_body: bytes = b""
    requests: List[RecordedRequest] = field(default_factory=list)

    def set_talks(self, talks: Optional[list]) -> None:
        self.listing_body = json.dumps(talks).encode("utf-8")

    async def _record(self, request: web.Request) -> None:
        body = await request.read()
        self.requests.append(
            RecordedRequest(request.method, request.path, request.headers.copy(), body)
        )

    async def visible_talks(self, request: web.Request) -> web.Response:
        await self._record(request)
        return web.Response(
            status=self.listing_status, body=self.listing_body, content_type="application/json"
        )

    async def post_talk(self, request: web.Request) -> web.Response:
        await self._record(request)
        return web.Response(
            status=self.submit_status, body=self.submit_body, content_type="application/json"
        )

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/api/talks/visible", self.visible_talks)
        app.router.add_post("/api/postTalk", self.post_talk)
        return app


@pytest.fixture
def registry():
    """Start a mock registry on a free local port."""
    state = MockRegistry()
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()

    def run(coro):
        return asyncio.run_coroutine_threadsafe(coro, loop).result(timeout=10)

    async def start() -> TestServer:
        server = TestServer(state.make_app(), host="127.0.0.1")
        await server.start_server()
        return server

    server = run(start())
    state.base_url = str(server.make_url("")).rstrip("/")
    try:
        yield state
    finally:
        run(server.close())
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=5)
        loop.close()


@pytest.fixture
def unreachable_url():
    """A base URL on which nothing is listening."""
    return f"http://127.0.0.1:{unused_port()}"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the settings."""
    for name in ("TALKS_CLI_BASE_URL", "TALKS_CLI_TIMEOUT", "TALKS_CLI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_talks() -> list:
    """Two talks listed out of category order."""
    return [dict(talk) for talk in SAMPLE_TALKS]
