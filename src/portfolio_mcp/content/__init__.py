"""Portfolio content source.

Components:
    - ContentLoader: Load and cache the content record from JSON
    - PortfolioContent and its parts: immutable content models
"""

from portfolio_mcp.content.loader import ContentLoader
from portfolio_mcp.content.models import (
    BlogPost,
    Experience,
    Link,
    PortfolioContent,
    Project,
    Skills,
)

__all__ = [
    "ContentLoader",
    "PortfolioContent",
    "Project",
    "Experience",
    "BlogPost",
    "Link",
    "Skills",
]
