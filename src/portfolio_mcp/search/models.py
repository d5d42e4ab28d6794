"""Search result models for the portfolio search engine.

This module defines the closed set of content sections and the structure of
results returned by `search_content`, plus the scored wrapper used
internally for ranking.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Section(str, Enum):
    """Content section a search result belongs to.

    The set is closed: every candidate block is tagged with exactly one of
    these values, and the value doubles as the label shown by the shell
    (e.g. ``[projects]``).
    """
    ABOUT = "about"
    PROJECTS = "projects"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    LEARNING = "learning"
    CONTRIBUTIONS = "contributions"
    BLOG = "blog"
    CONTACT = "contact"
    LINKS = "links"


@dataclass(frozen=True)
class SearchResult:
    """One ranked search match.

    Attributes:
        id: Identifier unique within one response
            Examples: "about", "project-local-rag-chatbot", "exp-0", "link-2"
        title: Display title (e.g. "Project: Local RAG Chatbot")
        section: Section tag
        snippet: Excerpt of the original (non-normalized) text around the
            first literal token hit, at most ~160 characters plus ellipses
        href: Internal anchor ("#projects") or absolute external URL
        meta: Extra display fields
            Common fields:
            - tech: Comma-joined technologies (projects)
            - date: Publication date (blog posts)

    Usage:
        >>> result = SearchResult(
        ...     id="skills",
        ...     title="Skills",
        ...     section=Section.SKILLS,
        ...     snippet="Python, Go, JavaScript",
        ...     href="#skills",
        ... )
        >>> result.to_dict()["section"]
        'skills'
    """

    id: str
    title: str
    section: Section
    snippet: str
    href: Optional[str] = None
    meta: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert search result to dictionary representation.

        Returns:
            Dictionary with all public result fields (no score)
        """
        return {
            "id": self.id,
            "title": self.title,
            "section": self.section.value,
            "snippet": self.snippet,
            "href": self.href,
            "meta": dict(self.meta),
        }


@dataclass(frozen=True)
class ScoredResult:
    """Search result paired with its internal ranking score.

    Returned by `rank()` for inspection and tests; `search_content()` strips
    the score before handing results to callers.
    """

    result: SearchResult
    score: float
