"""Shared pytest fixtures for guideview tests."""

import asyncio
from typing import Callable, Dict, Optional

import httpx
import pytest

from guideview.exceptions import FetchError
from guideview.services.guide_fetcher import GuideFetcher

ORIGIN = "http://guides.test"


def make_transport(guides: Dict[str, str], status_overrides: Optional[Dict[str, int]] = None):
    """MockTransport serving ``/guides/<name>.mdx`` from a dict."""
    status_overrides = status_overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if not path.startswith("/guides/") or not path.endswith(".mdx"):
            return httpx.Response(404, text="Not Found")
        name = path[len("/guides/") : -len(".mdx")]
        if name in status_overrides:
            return httpx.Response(status_overrides[name], text="Server says no")
        if name not in guides:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, text=guides[name])

    return httpx.MockTransport(handler)


@pytest.fixture
def make_fetcher() -> Callable[..., GuideFetcher]:
    """Build a GuideFetcher backed by an in-memory MockTransport."""

    def _make(guides: Dict[str, str], status_overrides: Optional[Dict[str, int]] = None):
        client = httpx.AsyncClient(transport=make_transport(guides, status_overrides))
        return GuideFetcher(ORIGIN, client=client, timeout=5)

    return _make


class ControlledFetcher:
    """Fetcher whose completions are released by the test, one guide at a time."""

    def __init__(self) -> None:
        self.calls = []
        self._pending: Dict[str, asyncio.Future] = {}

    def _future(self, identifier: str) -> asyncio.Future:
        if identifier not in self._pending:
            self._pending[identifier] = asyncio.get_running_loop().create_future()
        return self._pending[identifier]

    async def fetch(self, identifier: str) -> str:
        self.calls.append(identifier)
        result = await self._future(identifier)
        self._pending.pop(identifier, None)
        if isinstance(result, FetchError):
            raise result
        return result

    def resolve(self, identifier: str, text: str) -> None:
        self._future(identifier).set_result(text)

    def fail(self, identifier: str, reason: str = "boom") -> None:
        self._future(identifier).set_result(FetchError(reason, identifier=identifier))


@pytest.fixture
def controlled_fetcher() -> ControlledFetcher:
    return ControlledFetcher()


@pytest.fixture(autouse=True)
def clean_guideview_env(monkeypatch):
    """Keep tests independent of the developer's environment."""
    for name in (
        "GUIDEVIEW_ORIGIN",
        "GUIDEVIEW_FETCH_TIMEOUT",
        "GUIDEVIEW_CODE_THEME",
        "GUIDEVIEW_LOG_LEVEL",
        "COLORFGBG",
    ):
        monkeypatch.delenv(name, raising=False)
