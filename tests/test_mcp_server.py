"""
Tests for the FastMCP server (tools/mcp_server.py), driven through an
in-memory MCP client against the offline catalog.
"""

import json
from unittest.mock import patch

import pytest
import pytest_asyncio
from fastmcp import Client
from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError

from core.errors import CatalogUnavailableError
from tools import mcp_server


@pytest_asyncio.fixture
async def client(offline):
    mcp_server.catalog.clear()
    async with Client(mcp_server.mcp) as mcp_client:
        yield mcp_client
    mcp_server.catalog.clear()


async def _call(client, tool, **arguments):
    result = await client.call_tool(tool, arguments)
    return json.loads(result.content[0].text)


class TestToolDiscovery:
    """Test the advertised tool set."""

    @pytest.mark.asyncio
    async def test_tool_names(self, client):
        tools = await client.list_tools()

        assert {tool.name for tool in tools} == {
            "list_icons",
            "search_icons",
            "get_platform_usage",
            "get_icon_glyphs",
            "get_icon_glyph_by_style",
        }

    @pytest.mark.asyncio
    async def test_style_is_an_enum(self, client):
        """The style parameter publishes its allowed values."""
        tools = {tool.name: tool for tool in await client.list_tools()}
        schema = tools["get_icon_glyph_by_style"].inputSchema

        assert "stroke-rounded" in json.dumps(schema["properties"]["style"])


class TestListIcons:
    """Test the list_icons tool."""

    @pytest.mark.asyncio
    async def test_lists_catalog_without_ids(self, client):
        data = await _call(client, "list_icons")

        assert data["total"] == len(data["icons"]) == 14
        assert "id" not in data["icons"][0]

    @pytest.mark.asyncio
    async def test_catalog_failure(self, client, monkeypatch):
        """A catalog outage is reported as a tool error."""
        monkeypatch.setenv("HUGEICONS_OFFLINE", "false")
        mcp_server.catalog.clear()

        with patch("core.catalog.fetch_catalog_live",
                   side_effect=CatalogUnavailableError("Failed to load icons data")):
            with pytest.raises(ToolError, match="Failed to load icons data"):
                await client.call_tool("list_icons", {})


class TestSearchIcons:
    """Test the search_icons tool."""

    @pytest.mark.asyncio
    async def test_ranked_results(self, client):
        data = await _call(client, "search_icons", query="notification")

        assert data["query"] == "notification"
        assert data["total"] == 2
        assert [icon["name"] for icon in data["icons"]] == [
            "notification-03",
            "notification-off-01",
        ]
        assert set(data["icons"][0]) == {"name", "tags", "category", "featured", "version"}

    @pytest.mark.asyncio
    async def test_query_is_trimmed(self, client):
        data = await _call(client, "search_icons", query="  chart up  ")

        assert data["query"] == "chart up"
        assert [icon["name"] for icon in data["icons"]] == ["chart-up"]

    @pytest.mark.asyncio
    async def test_limit(self, client):
        """total counts every match, icons is cut at limit."""
        data = await _call(client, "search_icons", query="notification", limit=1)

        assert data["total"] == 2
        assert len(data["icons"]) == 1

    @pytest.mark.asyncio
    async def test_comma_separated(self, client):
        data = await _call(client, "search_icons", query="chart up, settings")

        assert [icon["name"] for icon in data["icons"]] == ["chart-up", "settings-01"]

    @pytest.mark.asyncio
    async def test_no_match(self, client):
        data = await _call(client, "search_icons", query="zzzzqqq")

        assert data["total"] == 0
        assert data["icons"] == []

    @pytest.mark.asyncio
    async def test_blank_query(self, client):
        data = await _call(client, "search_icons", query="   ")

        assert "non-empty" in data["error"]

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client):
        data = await _call(client, "search_icons", query="home", limit=0)

        assert "limit" in data["error"]


class TestGetPlatformUsage:
    """Test the get_platform_usage tool."""

    @pytest.mark.asyncio
    async def test_known_platform(self, client):
        data = await _call(client, "get_platform_usage", platform="Vue")

        assert data["platform"] == "vue"
        assert data["install_command"] == "npm install @hugeicons/vue"
        assert data["props"][0]["name"] == "icon"

    @pytest.mark.asyncio
    async def test_unknown_platform(self, client):
        data = await _call(client, "get_platform_usage", platform="cobol")

        assert "not supported" in data["error"]
        assert "react" in data["available_platforms"]


class TestGlyphTools:
    """Test the glyph tools."""

    @pytest.mark.asyncio
    async def test_all_glyphs(self, client):
        data = await _call(client, "get_icon_glyphs", icon_name="home-01")

        assert data["icon_name"] == "home-01"
        assert len(data["glyphs"]) == 9

    @pytest.mark.asyncio
    async def test_unknown_icon(self, client):
        with pytest.raises(ToolError, match="not found"):
            await client.call_tool("get_icon_glyphs", {"icon_name": "no-such-icon"})

    @pytest.mark.asyncio
    async def test_blank_icon_name(self, client):
        data = await _call(client, "get_icon_glyphs", icon_name=" ")

        assert "non-empty" in data["error"]

    @pytest.mark.asyncio
    async def test_glyph_by_style(self, client):
        data = await _call(client, "get_icon_glyph_by_style",
                           icon_name="home-01", style="duotone-rounded")

        assert data["style"] == "duotone-rounded"
        assert data["primary"]["unicode"] == "e001"
        assert data["secondary"]["unicode"] == "f001"

    @pytest.mark.asyncio
    async def test_glyph_by_single_layer_style(self, client):
        data = await _call(client, "get_icon_glyph_by_style",
                           icon_name="home-01", style="solid-sharp")

        assert data["secondary"] is None

    @pytest.mark.asyncio
    async def test_invalid_style_rejected(self, client):
        """Styles outside the enum never reach core/."""
        with pytest.raises(ToolError):
            await client.call_tool("get_icon_glyph_by_style",
                                   {"icon_name": "home-01", "style": "neon"})


class TestResources:
    """Test the documentation and index resources."""

    @pytest.mark.asyncio
    async def test_platform_docs(self, client):
        contents = await client.read_resource("hugeicons://docs/platforms/svelte")

        assert contents[0].text.startswith("# Hugeicons for svelte")

    @pytest.mark.asyncio
    async def test_unknown_platform_docs(self, client):
        with pytest.raises(McpError):
            await client.read_resource("hugeicons://docs/platforms/cobol")

    @pytest.mark.asyncio
    async def test_icons_index(self, client):
        contents = await client.read_resource("hugeicons://icons/index")
        icons = json.loads(contents[0].text)

        assert len(icons) == 14
        assert icons[0]["name"] == "home-01"
