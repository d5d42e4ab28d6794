"""Fuzzy, section-weighted search over portfolio content."""

from portfolio_mcp.search.engine import rank, search_content
from portfolio_mcp.search.models import ScoredResult, SearchResult, Section
from portfolio_mcp.search.scoring import DEFAULT_TUNING, SECTION_WEIGHTS, FuzzyTuning

__all__ = [
    "search_content",
    "rank",
    "SearchResult",
    "ScoredResult",
    "Section",
    "FuzzyTuning",
    "DEFAULT_TUNING",
    "SECTION_WEIGHTS",
]
