"""Portfolio Search Tool - Fuzzy keyword search across portfolio content."""

from typing import Any

from fastmcp import FastMCP

from portfolio_mcp.contracts import build_ok, build_tool_data
from portfolio_mcp.search import Section, search_content
from portfolio_mcp.utils import SearchLimit, SearchQuery


def register(mcp: FastMCP) -> None:
    """Register portfolio_search tool with the MCP server."""

    @mcp.tool()
    def portfolio_search(
        query: SearchQuery,
        limit: SearchLimit = 10,
    ) -> dict[str, Any]:
        """Search the portfolio by keywords (like grep, but typo tolerant).

        Matches every section: about, projects, skills, experience, learning
        notes, contributions, blog posts, contact channels and links. Results
        are ranked by relevance; each carries a short snippet around the
        first hit and a link (page anchor such as '#projects' or a URL).

        When to use:
        - You have keywords but don't know where they appear
        - Example: "python", "rag chatbot", "backend engineer"

        Related tools:
        - portfolio_browse: Read a file or list a directory of the portfolio tree
        - portfolio_shell: Run terminal commands (ls, cd, cat, search, open)
        """
        results = search_content(query)[:limit]
        entries = [result.to_dict() for result in results]

        payload: dict[str, Any] = build_tool_data(
            source="search",
            action="query",
            entries=entries,
            summary={
                "query": query,
                "count": len(entries),
            },
        )

        if not entries:
            payload["summary"]["hints"] = [
                "Try broader keywords (for example: python, backend, chatbot).",
                "Use portfolio_browse to list sections and read files directly.",
            ]
            payload["summary"]["available_sections"] = [section.value for section in Section]

        return build_ok(payload)
