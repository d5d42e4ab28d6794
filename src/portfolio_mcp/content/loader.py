"""Data loading layer for portfolio content.

Loads the portfolio content record from JSON with caching. The bundled
`resources/portfolio.json` is used unless `PORTFOLIO_MCP_CONTENT_PATH`
points at another file.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from portfolio_mcp.config import get_server_config
from portfolio_mcp.content.models import PortfolioContent

logger = logging.getLogger("portfolio-mcp.content")

# Bundled content shipped with the package
DEFAULT_CONTENT_PATH = Path(__file__).parent / "resources" / "portfolio.json"


class ContentLoader:
    """Loads and caches portfolio content.

    All methods are static; `load_default` caches its result so the content
    file is read once per process.
    """

    @staticmethod
    @lru_cache(maxsize=1)
    def load_default() -> PortfolioContent:
        """Load the configured (or bundled) content file with caching.

        Returns:
            Validated PortfolioContent

        Raises:
            FileNotFoundError: If the content file doesn't exist
            pydantic.ValidationError: If the file doesn't match the content schema
        """
        configured = get_server_config().content_path
        path = Path(configured) if configured else DEFAULT_CONTENT_PATH
        return ContentLoader.load_file(path)

    @staticmethod
    def load_file(path: Path | str) -> PortfolioContent:
        """Load and validate a content JSON file (uncached)."""
        content_path = Path(path)
        if not content_path.exists():
            raise FileNotFoundError(f"Portfolio content file not found: {content_path}")

        with open(content_path, encoding="utf-8") as f:
            raw = json.load(f)

        content = ContentLoader.from_dict(raw)
        logger.info(
            "Loaded portfolio content from %s (%d projects, %d posts)",
            content_path,
            len(content.projects),
            len(content.blog),
        )
        return content

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> PortfolioContent:
        """Validate an in-memory content mapping."""
        return PortfolioContent.model_validate(raw)

    @staticmethod
    def clear_cache() -> None:
        """Drop the cached default content (next load re-reads the file)."""
        ContentLoader.load_default.cache_clear()
