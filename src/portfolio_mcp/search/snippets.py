"""Snippet extraction for search results."""

from typing import List

from portfolio_mcp.search.normalize import normalize_text

ELLIPSIS = "..."


def make_snippet(original: str, tokens: List[str], window: int = 160) -> str:
    """Cut a window of the original text around the first literal token hit.

    Tokens are tried in query order; the first one that occurs in the
    normalized text anchors a window of ``window // 2`` characters on each
    side. Fuzzy matches need not be literal substrings, so when no token
    occurs the first ``window`` characters are used instead. Ellipses mark
    truncated sides.

    Examples:
        >>> make_snippet("Python, Go, JavaScript", ["go"])
        'Python, Go, JavaScript'
        >>> make_snippet("x" * 200, ["zz"], window=10)
        'xxxxxxxxxx...'
    """
    if not original:
        return ""

    normalized = normalize_text(original)
    half = window // 2
    for token in tokens:
        index = normalized.find(token)
        if index < 0:
            continue
        start = max(0, index - half)
        end = min(len(original), index + len(token) + half)
        prefix = ELLIPSIS if start > 0 else ""
        suffix = ELLIPSIS if end < len(original) else ""
        return f"{prefix}{original[start:end]}{suffix}"

    suffix = ELLIPSIS if len(original) > window else ""
    return original[:window] + suffix
