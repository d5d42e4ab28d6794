"""Portfolio MCP Server - Portfolio search, tree and terminal tools exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from portfolio_mcp import __version__
from portfolio_mcp.tools import browse_tree, search_portfolio, shell

mcp = FastMCP(
    "Portfolio MCP Server",
    instructions=(
        "Personal portfolio MCP server. "
        "Provides fuzzy search across portfolio sections, a read-only tree "
        "of portfolio files (about, projects, skills, experience, contact, "
        "blog, links), and stateful terminal sessions with ls/cd/cat/search/open "
        "commands and tab completion."
    ),
)

logger = logging.getLogger("portfolio-mcp.server")

# Register content tools
search_portfolio.register(mcp)
browse_tree.register(mcp)

# Register terminal tools
shell.register(mcp)


def main():
    """Entry point for the Portfolio MCP server."""
    parser = argparse.ArgumentParser(
        prog="portfolio-mcp",
        description="Portfolio MCP Server - portfolio search, tree and terminal tools exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"portfolio-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.debug("Starting portfolio-mcp %s over %s", __version__, args.transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
