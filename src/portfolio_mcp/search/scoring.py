"""Fuzzy token scoring for portfolio search.

Every query token is scored against a normalized text block on three
quality tiers:

- exact substring: 1.0
- prefix of a word in the block: 0.85
- subsequence with adjacency weighting: below 0.8

A block's score is the mean token score times its section weight. Titles of
projects, experience entries and blog posts earn a small extra boost so a
title hit outranks an equal body-only hit.

The numeric constants are heuristic tuning values kept for ranking
compatibility; they are grouped in `FuzzyTuning` so callers can experiment
without touching the algorithm.
"""

import re
from dataclasses import dataclass
from typing import Dict, List

from portfolio_mcp.search.models import Section
from portfolio_mcp.search.normalize import normalize_text


@dataclass(frozen=True)
class FuzzyTuning:
    """Scoring constants.

    Attributes:
        exact_score: Token found verbatim in the block
        prefix_score: Token starts a word in the block
        streak_bonus: Extra credit per consecutive matched character
        normalization_divisor: Divisor applied to the per-character average
        fuzzy_scale: Multiplier applied to the subsequence score
        fuzzy_cap: Upper bound for any subsequence-only token score
        title_boost: Share of the title's mean token score added on top
        min_score: Results below this score are dropped
        max_results: Maximum number of ranked results
        snippet_window: Snippet length, split evenly around the hit
    """

    exact_score: float = 1.0
    prefix_score: float = 0.85
    streak_bonus: float = 0.3
    normalization_divisor: float = 1.2
    fuzzy_scale: float = 0.8
    fuzzy_cap: float = 0.8
    title_boost: float = 0.15
    min_score: float = 0.3
    max_results: int = 24
    snippet_window: int = 160


DEFAULT_TUNING = FuzzyTuning()

# Relative importance of each section in the final ranking
SECTION_WEIGHTS: Dict[Section, float] = {
    Section.ABOUT: 0.9,
    Section.PROJECTS: 1.0,
    Section.EXPERIENCE: 0.95,
    Section.SKILLS: 0.75,
    Section.CONTRIBUTIONS: 0.65,
    Section.BLOG: 0.7,
    Section.LEARNING: 0.6,
    Section.CONTACT: 0.55,
    Section.LINKS: 0.5,
}


def token_score(token: str, haystack: str, tuning: FuzzyTuning = DEFAULT_TUNING) -> float:
    """Score one normalized token against one normalized block.

    Examples:
        >>> token_score("python", "python, go")
        1.0
        >>> round(token_score("pyth", "p-y-t-h"), 3)  # subsequence only
        0.667
        >>> token_score("rust", "python, go")
        0.0
    """
    if not token or not haystack:
        return 0.0

    if token in haystack:
        return tuning.exact_score

    if re.search(r"(?:^|\W)" + re.escape(token), haystack):
        return tuning.prefix_score

    subsequence = subsequence_adjacency_score(token, haystack, tuning)
    return min(tuning.fuzzy_cap, subsequence * tuning.fuzzy_scale)


def subsequence_adjacency_score(
    needle: str, haystack: str, tuning: FuzzyTuning = DEFAULT_TUNING
) -> float:
    """Match needle characters in order through haystack, rewarding runs.

    Each matched character is worth 1; a match immediately following the
    previous match extends the streak and adds ``streak * streak_bonus``.
    Any needle character left unmatched makes the score 0. The total is
    averaged per needle character, divided by ``normalization_divisor`` and
    clamped to [0, 1].

    Examples:
        >>> subsequence_adjacency_score("abc", "a_b_c")
        0.8333333333333334
        >>> subsequence_adjacency_score("abc", "xabcx")  # one run: 1 + 1.3 + 1.6
        1.0
        >>> subsequence_adjacency_score("abc", "ab")
        0.0
    """
    if not needle:
        return 0.0

    needle_index = 0
    score = 0.0
    streak = 0
    last_match = -1

    for position, char in enumerate(haystack):
        if needle_index >= len(needle):
            break
        if char != needle[needle_index]:
            continue
        if last_match >= 0 and position == last_match + 1:
            streak += 1
            score += 1 + streak * tuning.streak_bonus
        else:
            streak = 0
            score += 1
        last_match = position
        needle_index += 1

    if needle_index < len(needle):
        return 0.0

    base = score / len(needle)
    return max(0.0, min(1.0, base / tuning.normalization_divisor))


def mean_token_score(tokens: List[str], haystack: str, tuning: FuzzyTuning = DEFAULT_TUNING) -> float:
    """Arithmetic mean of token scores against one block."""
    if not tokens or not haystack:
        return 0.0
    return sum(token_score(token, haystack, tuning) for token in tokens) / len(tokens)


def section_weighted_score(
    tokens: List[str], block: str, weight: float = 1.0, tuning: FuzzyTuning = DEFAULT_TUNING
) -> float:
    """Mean token score of a normalized block scaled by its section weight."""
    if not block:
        return 0.0
    return mean_token_score(tokens, block, tuning) * weight


def title_boost(tokens: List[str], title: str, tuning: FuzzyTuning = DEFAULT_TUNING) -> float:
    """Small additive boost for tokens that hit the (raw) title."""
    return mean_token_score(tokens, normalize_text(title), tuning) * tuning.title_boost
