"""Portfolio Shell Tools - Stateful terminal sessions over the portfolio tree."""

import re
from typing import Any

from fastmcp import FastMCP

from portfolio_mcp.config import get_server_config
from portfolio_mcp.contracts import INVALID_SESSION, build_error, build_ok, build_tool_data
from portfolio_mcp.shell import ShellInterpreter, get_session_manager
from portfolio_mcp.utils import (
    SESSION_ID_MAX_LENGTH,
    SESSION_ID_PATTERN,
    CaretAtEnd,
    CompletionText,
    SessionId,
    ShellLine,
)

_SESSION_ID_RE = re.compile(SESSION_ID_PATTERN)


def register(mcp: FastMCP) -> None:
    """Register portfolio_shell and portfolio_shell_complete tools."""

    @mcp.tool()
    def portfolio_shell(
        line: ShellLine,
        session_id: SessionId = None,
    ) -> dict[str, Any]:
        """Run one line in a portfolio terminal session.

        Sessions keep their working directory, history and search mode
        between calls.

        Commands:
        - ls | l: List the working directory
        - cd <dir|..>: Change directory (no argument: back to /)
        - cat <file>: Print a file
        - about | projects | skills | experience | contact | blog | links:
          Print a section without cd/cat
        - search <query>: Fuzzy search; 'search' alone makes the next line a query
        - open <url|#section|section>: Request navigation (reported in summary.actions)
        - clear, help

        Related tools:
        - portfolio_shell_complete: Tab completion within the same session
        - portfolio_search: Structured search results
        """
        resolved = _resolve_session_id(session_id)
        if resolved is None:
            return _invalid_session()

        with get_session_manager().use(resolved) as shell:
            entries = shell.submit(line)
            transition = shell.last_transition
            cleared = bool(transition and transition.cleared)
            actions = [request.to_dict() for request in transition.requests] if transition else []
            summary = _session_summary(resolved, shell)

        summary.update({"cleared": cleared, "actions": actions, "count": len(entries)})
        return build_ok(
            build_tool_data(
                source="shell",
                action="submit",
                entries=[entry.to_dict() for entry in entries],
                summary=summary,
            )
        )

    @mcp.tool()
    def portfolio_shell_complete(
        text: CompletionText,
        session_id: SessionId = None,
        caret_at_end: CaretAtEnd = True,
    ) -> dict[str, Any]:
        """Tab-complete the current input of a portfolio terminal session.

        Completes command names in first position, directory names after
        'cd' and file names after 'cat'. When several candidates share no
        longer prefix they are listed in the session history and returned
        as entries.
        """
        resolved = _resolve_session_id(session_id)
        if resolved is None:
            return _invalid_session()

        with get_session_manager().use(resolved) as shell:
            result = shell.complete_at(text, caret_at_end)
            summary = _session_summary(resolved, shell)

        summary.update(
            {
                "text": result.text,
                "candidates": list(result.candidates),
                "listed": result.listed,
            }
        )
        return build_ok(
            build_tool_data(
                source="shell",
                action="complete",
                entries=[{"candidate": candidate} for candidate in result.candidates],
                summary=summary,
            )
        )


def _resolve_session_id(session_id: str | None) -> str | None:
    """Explicit id or the configured default; None when the result is unusable."""
    resolved = session_id or get_server_config().default_session_id
    if len(resolved) > SESSION_ID_MAX_LENGTH or not _SESSION_ID_RE.match(resolved):
        return None
    return resolved


def _invalid_session() -> dict[str, Any]:
    return build_error(
        code=INVALID_SESSION,
        message="Session id is not usable.",
        details={
            "pattern": SESSION_ID_PATTERN,
            "max_length": SESSION_ID_MAX_LENGTH,
            "action": "Pass a session_id matching the pattern or fix PORTFOLIO_MCP_SESSION_ID",
        },
    )


def _session_summary(session_id: str, shell: ShellInterpreter) -> dict[str, Any]:
    return {
        "session_id": session_id,
        "cwd": shell.cwd,
        "mode": shell.mode.value,
        "prompt": shell.prompt,
    }
