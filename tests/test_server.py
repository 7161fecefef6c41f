import json

import pytest
from httpx import Response
from respx import MockRouter

from wp_content import config
from wp_content.server import ContentMCPServer
from wp_content.wordpress_client import ContentClient

POSTS_URL = f"{config.API_BASE}/posts"
CATEGORIES_URL = f"{config.API_BASE}/categories"


def payload(result) -> dict:
    assert len(result) == 1
    return json.loads(result[0].text)


class TestContentMCPServer:
    @pytest.fixture
    def mcp_server(self, content_client: ContentClient) -> ContentMCPServer:
        return ContentMCPServer(client=content_client)

    def test_lists_read_only_tools(self, mcp_server: ContentMCPServer):
        names = [tool.name for tool in mcp_server.list_tools()]

        assert names == ["list_posts", "get_post_by_slug", "list_all_slugs", "list_categories"]

    @pytest.mark.asyncio
    async def test_list_posts_tool(
        self, mcp_server: ContentMCPServer, make_post, respx_mock: MockRouter
    ):
        respx_mock.get(POSTS_URL).mock(
            Response(200, json=[make_post()], headers={"X-WP-TotalPages": "3"})
        )

        data = payload(await mcp_server.call_tool("list_posts", {"per_page": 1}))

        assert data["total_pages"] == 3
        assert data["posts"][0]["slug"] == "hello-world"

    @pytest.mark.asyncio
    async def test_list_posts_tool_as_cards(
        self, mcp_server: ContentMCPServer, make_post, respx_mock: MockRouter
    ):
        respx_mock.get(POSTS_URL).mock(Response(200, json=[make_post()]))

        data = payload(await mcp_server.call_tool("list_posts", {"cards": True}))

        assert data["cards"][0]["excerpt"] == "Short excerpt"

    @pytest.mark.asyncio
    async def test_get_post_by_slug_tool_not_found(
        self, mcp_server: ContentMCPServer, respx_mock: MockRouter
    ):
        respx_mock.get(POSTS_URL).mock(Response(200, json=[]))

        data = payload(await mcp_server.call_tool("get_post_by_slug", {"slug": "missing"}))

        assert "error" in data

    @pytest.mark.asyncio
    async def test_get_post_by_slug_tool_requires_slug(self, mcp_server: ContentMCPServer):
        data = payload(await mcp_server.call_tool("get_post_by_slug", {}))

        assert "slug" in data["error"]

    @pytest.mark.asyncio
    async def test_list_all_slugs_tool(self, mcp_server: ContentMCPServer, respx_mock: MockRouter):
        respx_mock.get(POSTS_URL).mock(Response(200, json=[{"slug": "a"}]))

        data = payload(await mcp_server.call_tool("list_all_slugs", {}))

        assert data == {"slugs": ["a"]}

    @pytest.mark.asyncio
    async def test_list_categories_tool_on_server_error(
        self, mcp_server: ContentMCPServer, respx_mock: MockRouter
    ):
        respx_mock.get(CATEGORIES_URL).mock(Response(500))

        data = payload(await mcp_server.call_tool("list_categories", {}))

        assert data == {"categories": []}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mcp_server: ContentMCPServer):
        data = payload(await mcp_server.call_tool("create_post", {}))

        assert data["error"] == "Herramienta desconocida: create_post"

    @pytest.mark.asyncio
    async def test_uninitialised_client(self):
        data = payload(await ContentMCPServer().call_tool("list_posts", {}))

        assert "error" in data
