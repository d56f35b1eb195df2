"""MCP サーバーの結合テスト.

FastMCP の Client を使い、実際のMCPプロトコル経由でツールを呼び出す。
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import pytest_asyncio
from fastmcp import Client

from fte_summary.mcp.server import _session_state, mcp


# ---------------------------------------------------------------------------
# Fixture: session_state をリセット + in-memory MCP Client
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_state():
    _session_state.clear()
    yield
    _session_state.clear()


@pytest_asyncio.fixture
async def client():
    """In-memory MCP クライアントを作成する。"""
    async with Client(mcp) as c:
        yield c


class TestMCPToolDiscovery:
    @pytest.mark.asyncio
    async def test_list_tools(self, client: Client):
        tools = await client.list_tools()
        assert sorted(t.name for t in tools) == [
            "export_excel",
            "get_location_detail",
            "get_summary",
            "list_locations",
            "load_dataset",
        ]

    @pytest.mark.asyncio
    async def test_tools_have_descriptions(self, client: Client):
        """全ツールに日本語の説明があること。"""
        tools = await client.list_tools()
        for tool in tools:
            assert tool.description, f"{tool.name} has no description"
            assert len(tool.description) > 10, f"{tool.name} description too short"


class TestMCPToolCalls:
    @pytest.mark.asyncio
    async def test_load_then_summary(self, client: Client, sample_payload, tmp_path: Path):
        path = tmp_path / "fte.json"
        path.write_text(json.dumps(sample_payload, ensure_ascii=False), encoding="utf-8")

        loaded = await client.call_tool("load_dataset", {"input_path": str(path)})
        assert loaded is not None
        assert "dataset" in _session_state

        summary = await client.call_tool("get_summary", {})
        assert summary is not None
