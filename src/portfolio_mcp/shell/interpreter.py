"""Stateful shell interpreter for one terminal session."""

import logging
from typing import List, Optional, Tuple

from portfolio_mcp.content import ContentLoader, PortfolioContent
from portfolio_mcp.shell.commands import SEARCH_MODE_PROMPT, ShellContext, execute
from portfolio_mcp.shell.completion import CompletionResult, complete
from portfolio_mcp.shell.environment import RecordingEnvironment, ShellEnvironment, dispatch
from portfolio_mcp.shell.state import (
    EntryKind,
    EnvironmentRequest,
    HistoryEntry,
    ShellMode,
    ShellState,
    Transition,
)

logger = logging.getLogger("portfolio-mcp.shell")

SEARCH_PROMPT = "search> "


def welcome_message(content: PortfolioContent) -> str:
    return (
        f"Welcome to {content.first_name}'s portfolio terminal. "
        "Type 'help' or run 'search' to search."
    )


class ShellInterpreter:
    """One terminal session over a portfolio.

    The tree is built once from the content record; every submitted line is
    run through the pure `execute` transition and the resulting state is
    committed before any side-effect request reaches the environment.

    Args:
        content: Content record (defaults to the loaded portfolio content)
        environment: Side-effect sink (defaults to a RecordingEnvironment)

    Example:
        >>> shell = ShellInterpreter()
        >>> _ = shell.submit("cd projects")
        >>> shell.cwd
        '/projects'
    """

    def __init__(
        self,
        content: Optional[PortfolioContent] = None,
        environment: Optional[ShellEnvironment] = None,
    ) -> None:
        self.content = content if content is not None else ContentLoader.load_default()
        self.environment: ShellEnvironment = environment if environment is not None else RecordingEnvironment()
        self.context = ShellContext.from_content(self.content)
        self._state = ShellState.initial(welcome_message(self.content))
        self._last_transition: Optional[Transition] = None

    # -- read-only views -----------------------------------------------------

    @property
    def state(self) -> ShellState:
        return self._state

    @property
    def cwd(self) -> str:
        return self._state.cwd

    @property
    def mode(self) -> ShellMode:
        return self._state.mode

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return self._state.history

    @property
    def prompt(self) -> str:
        if self._state.mode is ShellMode.AWAITING_SEARCH_QUERY:
            return SEARCH_PROMPT
        return f"{self.content.first_name}@portfolio:{self.cwd} >> "

    @property
    def last_transition(self) -> Optional[Transition]:
        return self._last_transition

    # -- operations ----------------------------------------------------------

    def submit(self, line: str) -> List[HistoryEntry]:
        """Run one line and return the entries it appended."""
        transition = execute(self.context, self._state, line)
        self._state = transition.state.evolve(input_buffer="")
        self._last_transition = transition
        logger.debug(
            "submit %r -> cwd=%s mode=%s entries=%d",
            line,
            self._state.cwd,
            self._state.mode.value,
            len(transition.entries),
        )
        for request in transition.requests:
            self._dispatch(request)
        return list(transition.entries)

    def complete_at(self, text: str, caret_at_end: bool = True) -> CompletionResult:
        result, self._state = complete(self.context, self._state, text, caret_at_end)
        logger.debug("complete %r -> %r (%d candidates)", text, result.text, len(result.candidates))
        return result

    def activate_search_mode(self) -> HistoryEntry:
        """Enter search mode as the search hotkey does; returns the system entry."""
        entry = HistoryEntry(EntryKind.SYSTEM, SEARCH_MODE_PROMPT)
        self._state = self._state.with_entries([entry]).evolve(
            mode=ShellMode.AWAITING_SEARCH_QUERY,
            input_buffer="",
        )
        return entry

    def _dispatch(self, request: EnvironmentRequest) -> None:
        try:
            dispatch(self.environment, request)
        except Exception as exc:
            # Side effects are fire-and-forget; the committed state stands
            logger.warning("Environment request %s %s failed: %s", request.action, request.target, exc)
