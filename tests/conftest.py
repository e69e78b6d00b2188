# File: tests/conftest.py
import logging
from collections import Counter
from collections.abc import AsyncIterator, Callable, Mapping
from dataclasses import dataclass, field
from typing import Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_sketch.config import CrawlerConfig
from site_sketch.logger import LOGGER_NAME

# path -> HTML text, HTTP status, or a ready aiohttp handler
Route = Union[str, int, Callable]


@dataclass
class SiteServer:
    """A running test site: its base URL and how often each path was requested."""

    base: str
    hits: Counter = field(default_factory=Counter)

    def url(self, path: str = "/") -> str:
        return f"{self.base}{path}"


def _handler(path: str, route: Route, hits: Counter):
    async def handle(request: web.Request) -> web.StreamResponse:
        hits[path] += 1
        if callable(route):
            return await route(request)
        if isinstance(route, int):
            return web.Response(status=route, text="error")
        return web.Response(text=route, content_type="text/html")

    return handle


@pytest_asyncio.fixture
async def serve_site(unused_tcp_port_factory) -> AsyncIterator[Callable]:
    """
    Start an aiohttp site from a ``{path: route}`` mapping on a free port.
    Unknown paths answer 404. All sites are cleaned up after the test.
    """
    runners: list[web.AppRunner] = []

    async def _serve(routes: Mapping[str, Route]) -> SiteServer:
        port = unused_tcp_port_factory()
        server = SiteServer(base=f"http://localhost:{port}")
        app = web.Application()
        for path, route in routes.items():
            app.router.add_get(path, _handler(path, route, server.hits))
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        await web.TCPSite(runner, "localhost", port).start()
        return server

    yield _serve

    for runner in runners:
        await runner.cleanup()


@pytest.fixture()
def fast_config() -> Callable[..., CrawlerConfig]:
    """Config factory with no pacing delay and a short timeout."""

    def _make(start_url: str, **overrides) -> CrawlerConfig:
        params = dict(start_url=start_url, request_delay=0.0, timeout=2.0, user_agent="TestAgent/1.0")
        params.update(overrides)
        return CrawlerConfig(**params)

    return _make


@pytest.fixture()
def sketch_log(caplog):
    """caplog wired to the project logger (which does not propagate to root)."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)
