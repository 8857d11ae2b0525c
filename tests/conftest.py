"""
Pytest configuration and fixtures for the tournament viewer tests.
"""
from typing import AsyncGenerator, Callable, Dict, List

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from config import Settings, get_settings
from main import app
from utils.challonge import ChallongeClient, get_challonge_client

BASE_URL = "https://api.challonge.test/v1"


class FakeChallonge:
    """Serves canned responses keyed by request path and records every call."""

    def __init__(self):
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add_json(self, path: str, payload, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, json=payload)

    def add(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"errors": ["Not found"]})
        return handler(request)

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def upstream() -> FakeChallonge:
    return FakeChallonge()


@pytest.fixture
def settings() -> Settings:
    return Settings(challonge_api_key="test-key", challonge_base_url=BASE_URL, _env_file=None)


@pytest.fixture
async def client(settings, upstream) -> AsyncGenerator[AsyncClient, None]:
    """Viewer client wired to the fake upstream."""

    def override_client() -> ChallongeClient:
        return ChallongeClient(
            settings.challonge_api_key,
            base_url=settings.challonge_base_url,
            transport=httpx.MockTransport(upstream),
        )

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_challonge_client] = override_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
