"""Validation models and utilities for Portfolio MCP tools."""

from typing import Annotated, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Search limits
DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 24

# Session id constraints
SESSION_ID_MAX_LENGTH = 64
SESSION_ID_PATTERN = r"^[A-Za-z0-9_.-]+$"


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally lowercase."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.lower() if lowercase else normalized


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


def split_tree_path(value: Optional[str]) -> list[str]:
    """Split a slash or space separated tree path into segments.

    >>> split_tree_path("/projects/local-rag-chatbot/")
    ['projects', 'local-rag-chatbot']
    >>> split_tree_path("projects README.md")
    ['projects', 'README.md']
    """
    text = normalize_input(value)
    if not text:
        return []
    return [part for part in text.replace(" ", "/").split("/") if part and part != "."]


# Free-text portfolio search query
SearchQuery = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description=(
            "Search keywords for portfolio content. Examples: 'python', "
            "'rag chatbot', 'backend engineer'. Case and accent insensitive, "
            "typos tolerated through fuzzy matching."
        ),
    ),
]

# Search limit
SearchLimit = Annotated[
    int,
    Field(
        default=DEFAULT_SEARCH_LIMIT,
        ge=1,
        le=MAX_SEARCH_LIMIT,
        description=f"Maximum number of results (1-{MAX_SEARCH_LIMIT}).",
    ),
]

# Shell session id
SessionId = Annotated[
    Optional[str],
    Field(
        default=None,
        max_length=SESSION_ID_MAX_LENGTH,
        pattern=SESSION_ID_PATTERN,
        description=(
            "Shell session to use. Sessions keep their own working directory, "
            "history and search mode. Omit to use the default session."
        ),
    ),
]

# One line of shell input
ShellLine = Annotated[
    str,
    Field(
        ...,
        description=(
            "One line of terminal input, e.g. 'ls', 'cd projects', 'cat about.txt', "
            "'search python', 'open #contact'. Blank lines are ignored."
        ),
    ),
]

# Current (partial) input for tab completion
CompletionText = Annotated[
    str,
    Field(
        ...,
        description="Current input text to complete, e.g. 'pro', 'cd pr', 'cat ab'.",
    ),
]

CaretAtEnd = Annotated[
    bool,
    Field(default=True, description="Completion only applies when the caret is at the end of the input"),
]
