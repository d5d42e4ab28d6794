"""Terminal-style shell over the portfolio's virtual tree.

Components:
    - execute / complete: pure state transitions
    - ShellInterpreter: one stateful session
    - ShellSessionManager: per-id sessions for the MCP server
"""

from portfolio_mcp.shell.commands import ShellContext, execute, format_results
from portfolio_mcp.shell.completion import CompletionResult, complete
from portfolio_mcp.shell.environment import (
    BrowserEnvironment,
    RecordingEnvironment,
    ShellEnvironment,
)
from portfolio_mcp.shell.interpreter import ShellInterpreter
from portfolio_mcp.shell.sessions import ShellSessionManager, get_session_manager
from portfolio_mcp.shell.state import (
    EntryKind,
    EnvironmentRequest,
    HistoryEntry,
    ShellMode,
    ShellState,
    Transition,
)

__all__ = [
    "ShellContext",
    "execute",
    "format_results",
    "CompletionResult",
    "complete",
    "ShellEnvironment",
    "RecordingEnvironment",
    "BrowserEnvironment",
    "ShellInterpreter",
    "ShellSessionManager",
    "get_session_manager",
    "EntryKind",
    "EnvironmentRequest",
    "HistoryEntry",
    "ShellMode",
    "ShellState",
    "Transition",
]
