"""Text normalization and query tokenization.

Queries and searchable text go through the same normalization so that
matching is case and accent insensitive ("Café" matches "cafe").
"""

import re
import unicodedata

# Combining diacritical marks left behind by NFKD decomposition
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_text(text: str) -> str:
    """Lower-case, decompose and strip combining marks.

    >>> normalize_text("Café Déjà Vu")
    'cafe deja vu'
    """
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed)


def tokenize(query: str) -> list[str]:
    """Split a raw query into normalized whitespace-separated tokens.

    Empty or whitespace-only queries produce no tokens. Duplicates are kept:
    each occurrence contributes to the mean token score on its own.

    >>> tokenize("  Python   Go ")
    ['python', 'go']
    >>> tokenize("   ")
    []
    """
    stripped = (query or "").strip()
    if not stripped:
        return []
    return normalize_text(stripped).split()
