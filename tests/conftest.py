"""
共享测试夹具

- FakeClock: 可手动推进的时间源
- FakeCatalog: 基于 httpx.MockTransport 的假 Clelp API，记录所有请求
"""

import json
from typing import Callable, Optional
from urllib.parse import unquote

import httpx
import pytest

from clelp_mcp.core.catalog import CatalogClient
from clelp_mcp.core.config import GatewayConfig
from clelp_mcp.core.dispatch import ToolDispatcher

API_URL = "https://clelp.ai/api"
POSTGRES_ID = "3f6c2a9e-1b2d-4c5e-8f90-123456789abc"


class FakeClock:
    """可推进的时钟"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 0, *, minutes: float = 0, hours: float = 0) -> None:
        self.now += seconds + minutes * 60 + hours * 3600


class FakeCatalog:
    """假 Clelp API"""

    def __init__(self):
        self.skills: list[dict] = []
        self.ratings: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.search_payload = None
        # (method, path) -> 自定义处理函数
        self.overrides: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add_skill(self, **fields) -> dict:
        self.skills.append(fields)
        return fields

    def find(self, identifier: str) -> Optional[dict]:
        for skill in self.skills:
            if identifier in (skill.get("id"), skill.get("slug")):
                return skill
        return None

    def paths(self) -> list[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        override = self.overrides.get((request.method, path))
        if override is not None:
            return override(request)

        if request.method == "GET" and path == "/api/skills":
            payload = self.search_payload
            if payload is None:
                payload = {"skills": self.skills}
            return httpx.Response(200, json=payload)

        if request.method == "GET" and path.startswith("/api/skills/"):
            skill = self.find(unquote(path.rsplit("/", 1)[1]))
            if skill is None:
                return httpx.Response(404, text="Skill not found")
            return httpx.Response(200, json=skill)

        if request.method == "POST" and path == "/api/ratings":
            body = json.loads(request.content)
            self.ratings.append(body)
            return httpx.Response(201, json={"id": f"rating-{len(self.ratings)}", **body})

        return httpx.Response(404, text="Not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> FakeCatalog:
    """预置一个 postgres-mcp 技能的假 API"""
    fake = FakeCatalog()
    fake.add_skill(
        id=POSTGRES_ID,
        name="Postgres MCP",
        slug="postgres-mcp",
        description="Query PostgreSQL databases",
        type="mcp",
        url="https://github.com/example/postgres-mcp",
        avg_claws=4.5,
        total_ratings=12,
        verified=True,
        best_for=["databases"],
        author="example",
        compatibility=["claude"],
        updated_at="2026-09-01T00:00:00Z",
        ratings=[{"claws": 5, "commentary": "Solid"}],
    )
    return fake


@pytest.fixture
def make_client(catalog: FakeCatalog) -> Callable[..., CatalogClient]:
    def _make(api_key: Optional[str] = "test-key", **kwargs) -> CatalogClient:
        return CatalogClient(API_URL, api_key, transport=catalog.transport, **kwargs)

    return _make


@pytest.fixture
def make_dispatcher(catalog: FakeCatalog, clock: FakeClock) -> Callable[..., ToolDispatcher]:
    def _make(api_key: Optional[str] = "test-key", **overrides) -> ToolDispatcher:
        config = GatewayConfig(api_url=API_URL, api_key=api_key, **overrides)
        client = CatalogClient(
            config.api_url,
            config.api_key,
            timeout=config.timeout,
            transport=catalog.transport,
        )
        return ToolDispatcher(config, client=client, clock=clock)

    return _make
