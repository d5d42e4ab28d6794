"""Portfolio MCP - fuzzy search and a virtual shell over portfolio content."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("portfolio-mcp")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = ["__version__"]
