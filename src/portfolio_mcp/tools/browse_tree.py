"""Portfolio Browse Tool - Navigate the portfolio tree and read its files."""

from typing import Any

from fastmcp import FastMCP
from pydantic import Field

from portfolio_mcp.content import ContentLoader
from portfolio_mcp.contracts import PATH_NOT_FOUND, build_error, build_ok, build_tool_data
from portfolio_mcp.utils import split_tree_path
from portfolio_mcp.vfs import DirectoryNode, build_tree


def register(mcp: FastMCP):
    """Register portfolio_browse tool with the MCP server."""

    @mcp.tool()
    def portfolio_browse(
        path: str | None = Field(
            None,
            description=(
                "Path in the portfolio tree (slash separated, relative to the root). Examples:\n"
                "- None or '': List top-level sections\n"
                "- 'projects': List project directories\n"
                "- 'projects/local-rag-chatbot/README.md': Read a project README\n"
                "- 'about/about.txt': Read the about file"
            ),
        ),
    ) -> dict[str, Any]:
        """Browse the portfolio tree by path (like ls + cat).

        Tree layout:
        - about/about.txt, skills/skills.txt, experience/experience.txt,
          contact/contact.txt, links/links.txt
        - projects/<project-id>/README.md
        - blog/<post-id>.md

        Related tools:
        - portfolio_search: Find content by keywords (when path unknown)
        - portfolio_shell: Same tree through a stateful terminal session
        """
        segments = split_tree_path(path)
        tree = build_tree(ContentLoader.load_default())
        node = tree.resolve(segments)

        if node is None:
            return _not_found(tree, segments)

        display_path = _display(segments)
        if isinstance(node, DirectoryNode):
            return build_ok(_list_directory(node, segments))

        return build_ok(
            build_tool_data(
                source="tree",
                action="browse",
                entries=[{"path": display_path, "name": node.name, "content": node.read()}],
                summary={"count": 1, "path": display_path, "type": node.kind.value},
            )
        )


def _display(segments: list[str]) -> str:
    return "/" + "/".join(segments)


def _entries(directory: DirectoryNode, segments: list[str]) -> list[dict[str, Any]]:
    return [
        {"name": child.name, "type": child.kind.value, "path": _display(segments + [child.name])}
        for child in directory.directories() + directory.files()
    ]


def _list_directory(directory: DirectoryNode, segments: list[str]) -> dict[str, Any]:
    entries = _entries(directory, segments)
    return build_tool_data(
        source="tree",
        action="browse",
        entries=entries,
        summary={"count": len(entries), "path": _display(segments), "type": directory.kind.value},
    )


def _not_found(tree: DirectoryNode, segments: list[str]) -> dict[str, Any]:
    """Error with the listing of the deepest directory that does exist."""
    nearest: list[str] = []
    directory = tree
    for segment in segments:
        child = directory.child(segment)
        if not isinstance(child, DirectoryNode):
            break
        directory = child
        nearest.append(segment)

    return build_error(
        code=PATH_NOT_FOUND,
        message=f"Path '{_display(segments)}' not found.",
        details={
            "input": {"path": _display(segments)},
            "nearest_directory": _display(nearest),
            "available": _entries(directory, nearest),
        },
    )
