"""Contract tests for portfolio-mcp tool response structures.

Verifies that each tool returns the expected envelope and field structure,
ensuring the API contract between portfolio-mcp and its consumers is stable.
"""

import json

import pytest

from portfolio_mcp.content import ContentLoader
from portfolio_mcp.server import mcp
from portfolio_mcp.shell import ShellSessionManager, sessions


def _parse_tool_payload(result) -> dict:
    assert result is not None
    assert len(result.content) > 0
    text = result.content[0].text
    assert text.startswith("{")
    return json.loads(text)


@pytest.fixture(autouse=True)
def isolated_sessions(monkeypatch):
    """Bundled content and a fresh session registry for every test."""
    monkeypatch.delenv("PORTFOLIO_MCP_CONTENT_PATH", raising=False)
    monkeypatch.delenv("PORTFOLIO_MCP_SESSION_ID", raising=False)
    ContentLoader.clear_cache()
    monkeypatch.setattr(sessions, "_session_manager", ShellSessionManager(max_sessions=8))
    yield
    ContentLoader.clear_cache()


@pytest.mark.asyncio
async def test_registered_tools() -> None:
    tools = await mcp._tool_manager.get_tools()
    assert set(tools) == {
        "portfolio_search",
        "portfolio_browse",
        "portfolio_shell",
        "portfolio_shell_complete",
    }


# ── Search ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_search_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_search", {"query": "python", "limit": 3})
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert payload.get("error") is None
    assert data["source"] == "search"
    assert data["action"] == "query"
    assert 1 <= data["summary"]["count"] <= 3
    assert len(data["entries"]) == data["summary"]["count"]
    first = data["entries"][0]
    assert set(first) == {"id", "title", "section", "snippet", "href", "meta"}
    assert first["title"] == "Project: Local RAG Chatbot"
    assert first["section"] == "projects"


@pytest.mark.asyncio
async def test_search_no_results_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_search", {"query": "qqqqqqqq"})
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert data["entries"] == []
    assert data["summary"]["count"] == 0
    assert data["summary"]["hints"]
    assert "projects" in data["summary"]["available_sections"]


@pytest.mark.asyncio
async def test_search_rejects_blank_query() -> None:
    with pytest.raises(Exception):
        await mcp._tool_manager.call_tool("portfolio_search", {"query": "   "})


@pytest.mark.asyncio
async def test_search_rejects_limit_out_of_range() -> None:
    with pytest.raises(Exception):
        await mcp._tool_manager.call_tool("portfolio_search", {"query": "python", "limit": 0})


# ── Browse ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_browse_root_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_browse", {})
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert data["source"] == "tree"
    assert data["action"] == "browse"
    assert data["summary"]["path"] == "/"
    assert [entry["name"] for entry in data["entries"]] == [
        "about",
        "projects",
        "skills",
        "experience",
        "contact",
        "blog",
        "links",
    ]
    assert data["entries"][1] == {"name": "projects", "type": "directory", "path": "/projects"}


@pytest.mark.asyncio
async def test_browse_directory_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_browse", {"path": "/projects/"})
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert [entry["name"] for entry in data["entries"]] == ["local-rag-chatbot", "version-set-manager"]
    assert data["summary"]["count"] == 2


@pytest.mark.asyncio
async def test_browse_file_contract() -> None:
    result = await mcp._tool_manager.call_tool(
        "portfolio_browse",
        {"path": "projects/local-rag-chatbot/README.md"},
    )
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert data["summary"]["type"] == "file"
    entry = data["entries"][0]
    assert entry["path"] == "/projects/local-rag-chatbot/README.md"
    assert entry["name"] == "README.md"
    assert entry["content"].startswith("# Local RAG Chatbot")


@pytest.mark.asyncio
async def test_browse_not_found_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_browse", {"path": "projects/nope/README.md"})
    payload = _parse_tool_payload(result)

    assert payload["ok"] is False
    assert payload["error"]["code"] == "path_not_found"
    details = payload["error"]["details"]
    assert details["input"]["path"] == "/projects/nope/README.md"
    assert details["nearest_directory"] == "/projects"
    assert [entry["name"] for entry in details["available"]] == ["local-rag-chatbot", "version-set-manager"]


# ── Shell ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_shell_submit_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "cd projects", "session_id": "t1"})
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert data["source"] == "shell"
    assert data["action"] == "submit"
    assert data["entries"] == [{"kind": "input", "text": "cd projects"}]
    summary = data["summary"]
    assert summary["session_id"] == "t1"
    assert summary["cwd"] == "/projects"
    assert summary["mode"] == "normal"
    assert summary["prompt"] == "Namra@portfolio:/projects >> "
    assert summary["cleared"] is False
    assert summary["actions"] == []

    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "ls", "session_id": "t1"})
    data = _parse_tool_payload(result)["data"]
    assert data["entries"][-1] == {"kind": "output", "text": "local-rag-chatbot\nversion-set-manager"}


@pytest.mark.asyncio
async def test_shell_sessions_are_isolated() -> None:
    await mcp._tool_manager.call_tool("portfolio_shell", {"line": "cd about", "session_id": "a"})
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "ls", "session_id": "b"})
    data = _parse_tool_payload(result)["data"]
    assert data["summary"]["cwd"] == "/"


@pytest.mark.asyncio
async def test_shell_default_session() -> None:
    await mcp._tool_manager.call_tool("portfolio_shell", {"line": "cd skills"})
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "cat skills.txt"})
    data = _parse_tool_payload(result)["data"]
    assert data["summary"]["session_id"] == "default"
    assert data["entries"][-1]["text"].startswith("Core: Python, Go")


@pytest.mark.asyncio
async def test_shell_open_reports_actions() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "open #contact"})
    data = _parse_tool_payload(result)["data"]
    assert data["entries"][-1]["text"] == "Navigating to #contact"
    assert data["summary"]["actions"] == [{"action": "navigate", "target": "#contact"}]


@pytest.mark.asyncio
async def test_shell_search_mode_contract() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "search"})
    data = _parse_tool_payload(result)["data"]
    assert data["summary"]["mode"] == "awaiting_search_query"
    assert data["summary"]["prompt"] == "search> "
    assert data["entries"][-1]["kind"] == "system"

    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "backend engineer"})
    data = _parse_tool_payload(result)["data"]
    assert data["summary"]["mode"] == "normal"
    assert data["entries"][-1]["text"].startswith("Fuzzy search results (")


@pytest.mark.asyncio
async def test_shell_clear_contract() -> None:
    await mcp._tool_manager.call_tool("portfolio_shell", {"line": "help"})
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "clear"})
    data = _parse_tool_payload(result)["data"]
    assert data["entries"] == []
    assert data["summary"]["cleared"] is True


@pytest.mark.asyncio
async def test_shell_invalid_default_session(monkeypatch) -> None:
    monkeypatch.setenv("PORTFOLIO_MCP_SESSION_ID", "not a valid id!")
    result = await mcp._tool_manager.call_tool("portfolio_shell", {"line": "ls"})
    payload = _parse_tool_payload(result)

    assert payload["ok"] is False
    assert payload["error"]["code"] == "invalid_session"


@pytest.mark.asyncio
async def test_shell_rejects_bad_session_id_argument() -> None:
    with pytest.raises(Exception):
        await mcp._tool_manager.call_tool("portfolio_shell", {"line": "ls", "session_id": "bad id"})


@pytest.mark.asyncio
async def test_shell_complete_contract() -> None:
    result = await mcp._tool_manager.call_tool(
        "portfolio_shell_complete",
        {"text": "pro", "session_id": "c1"},
    )
    payload = _parse_tool_payload(result)
    data = payload["data"]

    assert payload["ok"] is True
    assert data["source"] == "shell"
    assert data["action"] == "complete"
    assert data["summary"]["text"] == "projects "
    assert data["summary"]["candidates"] == ["projects"]
    assert data["summary"]["listed"] is False
    assert data["entries"] == [{"candidate": "projects"}]


@pytest.mark.asyncio
async def test_shell_complete_lists_candidates() -> None:
    result = await mcp._tool_manager.call_tool("portfolio_shell_complete", {"text": "c", "session_id": "c2"})
    data = _parse_tool_payload(result)["data"]
    assert data["summary"]["listed"] is True
    assert data["summary"]["text"] == "c"
    assert data["summary"]["candidates"] == ["clear", "cd", "cat", "contact"]
