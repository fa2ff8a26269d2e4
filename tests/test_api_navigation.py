"""Tests for navigation API endpoints."""

from pathlib import Path

import pytest
from aiohttp.test_utils import TestClient
from docsnav.config import Config
from docsnav.server import create_app


@pytest.fixture
async def client(test_config: Config, aiohttp_client) -> TestClient:
    """Create test client with configured app."""
    return await aiohttp_client(create_app(test_config))


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__populated_docs__returns_full_tree(self, client: TestClient) -> None:
        response = await client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert [item["title"] for item in data["items"]] == ["Home", "Guide", "Reference"]

    @pytest.mark.asyncio
    async def test__section_node__serialized_with_sentinel(self, client: TestClient) -> None:
        response = await client.get("/api/navigation")

        data = await response.json()
        guide = data["items"][1]
        assert guide["url"] == "#"
        assert guide["slug"] == ["guide"]
        assert guide["children"][0] == {
            "title": "Intro",
            "slug": ["guide", "intro"],
            "url": "/docs/guide/intro",
            "children": [],
        }

    @pytest.mark.asyncio
    async def test__empty_docs__returns_empty_items(
        self,
        docs_dir: Path,
        test_config: Config,
        aiohttp_client,
    ) -> None:
        for path in sorted(docs_dir.rglob("*.md*"), reverse=True):
            path.unlink()
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/navigation")

        assert response.status == 200
        assert await response.json() == {"items": []}


class TestGetFlatNavigation:
    """Tests for GET /api/navigation/flat."""

    @pytest.mark.asyncio
    async def test__returns_reading_order_without_sections(self, client: TestClient) -> None:
        response = await client.get("/api/navigation/flat")

        assert response.status == 200
        data = await response.json()
        assert [item["url"] for item in data["items"]] == [
            "/docs",
            "/docs/guide/intro",
            "/docs/guide/setup",
            "/docs/reference/api",
            "/docs/reference/api/endpoints",
        ]
        assert "children" not in data["items"][0]
