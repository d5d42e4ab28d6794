"""Portfolio MCP tool implementations."""

from . import (
    browse_tree,
    search_portfolio,
    shell,
)

__all__ = [
    "browse_tree",
    "search_portfolio",
    "shell",
]
