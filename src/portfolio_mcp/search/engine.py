"""Portfolio search engine.

Maps a free-text query and a content record to a ranked list of results.
The engine is a pure function of its inputs: it keeps no index and no
state, so identical calls always return identical rankings and it is safe
to call from several threads at once.

Pipeline:
    1. Tokenize the normalized query (empty query -> no results)
    2. Build one candidate text block per section entry
    3. Score each block (mean token score x section weight, + title boost)
    4. Drop weak matches, sort by score desc / title asc, truncate
    5. Cut snippets for the survivors and strip scores
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from portfolio_mcp.content import ContentLoader, PortfolioContent
from portfolio_mcp.search.models import ScoredResult, SearchResult, Section
from portfolio_mcp.search.normalize import normalize_text, tokenize
from portfolio_mcp.search.scoring import (
    DEFAULT_TUNING,
    SECTION_WEIGHTS,
    FuzzyTuning,
    section_weighted_score,
    title_boost,
)
from portfolio_mcp.search.snippets import make_snippet

logger = logging.getLogger("portfolio-mcp.search")

# Separator between concatenated fields of one block
BLOCK_SEPARATOR = " • "


@dataclass(frozen=True)
class Candidate:
    """Searchable block built from one content entry.

    Attributes:
        id: Result id
        title: Result title
        section: Section tag (selects the weight)
        text: Original (non-normalized) block text
        href: Result link
        meta: Result metadata
        boost_title: Text the title boost is computed against, None for
            sections without a title boost
    """

    id: str
    title: str
    section: Section
    text: str
    href: Optional[str] = None
    meta: Dict[str, str] = field(default_factory=dict)
    boost_title: Optional[str] = None


def iter_candidates(source: PortfolioContent) -> Iterator[Candidate]:
    """Yield candidate blocks for every non-empty section entry."""
    about = BLOCK_SEPARATOR.join(
        part for part in (source.full_name, source.education, source.summary, *source.learning) if part
    )
    if about:
        yield Candidate(id="about", title="About Me", section=Section.ABOUT, text=about, href="#about")

    skills = ", ".join((*source.skills.core_stack, *source.skills.domains, *source.skills.interests))
    if skills:
        yield Candidate(id="skills", title="Skills", section=Section.SKILLS, text=skills, href="#skills")

    for project in source.projects:
        yield Candidate(
            id=f"project-{project.id}",
            title=f"Project: {project.title}",
            section=Section.PROJECTS,
            text=BLOCK_SEPARATOR.join((project.title, project.description, *project.technologies)),
            href="#projects",
            meta={"tech": ", ".join(project.technologies)},
            boost_title=project.title,
        )

    for index, entry in enumerate(source.experience):
        header = f"{entry.role} @ {entry.company} ({entry.period})"
        yield Candidate(
            id=f"exp-{index}",
            title=f"Experience: {entry.role} @ {entry.company}",
            section=Section.EXPERIENCE,
            text=f"{header} — {entry.summary}",
            href="#experience",
            boost_title=header,
        )

    learning = BLOCK_SEPARATOR.join(source.learning)
    if learning:
        yield Candidate(id="learning", title="Learning", section=Section.LEARNING, text=learning, href="#about")

    contributions = BLOCK_SEPARATOR.join(source.contributions)
    if contributions:
        yield Candidate(
            id="contrib",
            title="Contributions",
            section=Section.CONTRIBUTIONS,
            text=contributions,
            href="#projects",
        )

    for post in source.blog:
        yield Candidate(
            id=f"blog-{post.id}",
            title=f"Blog: {post.title}",
            section=Section.BLOG,
            text=f"{post.title} — {post.excerpt}",
            href=post.url or "#blog",
            meta={"date": post.date},
            boost_title=post.title,
        )

    contact = BLOCK_SEPARATOR.join(f"{channel}: {value}" for channel, value in source.contact_items())
    if contact:
        yield Candidate(id="contact", title="Contact", section=Section.CONTACT, text=contact, href="#contact")

    for index, link in enumerate(source.links):
        yield Candidate(
            id=f"link-{index}",
            title=f"Link: {link.label}",
            section=Section.LINKS,
            text=f"{link.label} — {link.href}",
            href=link.href,
        )


def score_candidate(candidate: Candidate, tokens: List[str], tuning: FuzzyTuning = DEFAULT_TUNING) -> float:
    """Section-weighted block score plus the optional title boost."""
    block = normalize_text(candidate.text)
    score = section_weighted_score(tokens, block, SECTION_WEIGHTS[candidate.section], tuning)
    if candidate.boost_title is not None:
        score += title_boost(tokens, candidate.boost_title, tuning)
    return score


def rank(
    query: str,
    source: Optional[PortfolioContent] = None,
    tuning: FuzzyTuning = DEFAULT_TUNING,
) -> List[ScoredResult]:
    """Score, filter and order results, keeping their scores.

    Args:
        query: Free-text query
        source: Content record (defaults to the loaded portfolio content)
        tuning: Scoring constants

    Returns:
        At most ``tuning.max_results`` scored results, every score at least
        ``tuning.min_score``, sorted by score (desc) then title (asc)
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    content = ContentLoader.load_default() if source is None else source

    scored: List[tuple[float, Candidate]] = []
    for candidate in iter_candidates(content):
        score = score_candidate(candidate, tokens, tuning)
        if score > 0 and score >= tuning.min_score:
            scored.append((score, candidate))

    scored.sort(key=lambda pair: (-pair[0], pair[1].title))
    top = scored[: tuning.max_results]
    logger.debug("Query %r: %d tokens, %d results", query, len(tokens), len(top))

    return [
        ScoredResult(
            result=SearchResult(
                id=candidate.id,
                title=candidate.title,
                section=candidate.section,
                snippet=make_snippet(candidate.text, tokens, tuning.snippet_window),
                href=candidate.href,
                meta=dict(candidate.meta),
            ),
            score=score,
        )
        for score, candidate in top
    ]


def search_content(
    query: str,
    source: Optional[PortfolioContent] = None,
    tuning: FuzzyTuning = DEFAULT_TUNING,
) -> List[SearchResult]:
    """Fuzzy search across portfolio content.

    Supports multi-token queries with exact/prefix bonuses per token,
    subsequence matching with adjacency weighting and section-aware
    weights. Empty or whitespace-only queries and queries that match nothing
    return an empty list; this function never raises for string input.

    Example:
        >>> results = search_content("python")
        >>> results[0].title
        'Project: Local RAG Chatbot'
    """
    return [item.result for item in rank(query, source, tuning)]
