"""Shell command execution.

`execute` is a pure transition: given the session context, the current state
and one submitted line, it returns the next state together with the history
entries the line produced and any environment requests. It never raises for
string input; user mistakes become output entries.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from portfolio_mcp.content import PortfolioContent
from portfolio_mcp.search import SearchResult, search_content
from portfolio_mcp.shell.environment import NAVIGATE, OPEN_EXTERNAL
from portfolio_mcp.shell.state import (
    EntryKind,
    EnvironmentRequest,
    HistoryEntry,
    ShellMode,
    ShellState,
    Transition,
)
from portfolio_mcp.vfs import SECTION_NAMES, DirectoryNode, FileNode, SectionFormatter, build_tree

BASE_COMMANDS = ("help", "clear", "ls", "l", "cd", "cat", "open", "search")
SECTION_COMMANDS = SECTION_NAMES

SEPARATOR = "─" * 79

SEARCH_MODE_PROMPT = "Search mode: Type your query and press Enter."
NO_RESULTS = "Fuzzy search results (0): No results."
SEARCH_TIP = "Tip: use direct section commands like 'about' or 'projects'."
ERR_NO_SUCH_DIRECTORY = "Error: No such directory"
ERR_FILE_NOT_FOUND = "Error: File not found"
ERR_COMMAND_NOT_FOUND = "Error: Command not found. Type 'help' for available commands."
USAGE_CAT = "Usage: cat <file>"
USAGE_OPEN = "Usage: open <url|#section|section>"

HELP_TEXT = (
    "Commands:\n"
    "  ls | l                   List directories/files\n"
    "  cd <section|..>          Change directory (about, projects, skills, contact, blog, links)\n"
    "  cat <file>               View file content (e.g., cat about.txt)\n"
    "  open <url|#section|section>\n"
    "                           Open external URL or navigate to a page section (e.g., open #projects)\n"
    "  search [query]           Fuzzy search across portfolio (no query: enter search mode)\n"
    "  clear                    Clear screen\n"
    "  help                     Show this help\n"
    "\nDirect section commands:\n"
    "  about | projects | skills | experience | contact | blog | links\n"
    "                           Print that section content without cd/cat\n"
    "\nFeatures:\n"
    "  Tab completion           Auto-complete commands, cd targets, and file names"
)


@dataclass(frozen=True)
class ShellContext:
    """Read-only inputs shared by every command of a session."""

    content: PortfolioContent
    tree: DirectoryNode

    @classmethod
    def from_content(cls, content: PortfolioContent) -> "ShellContext":
        return cls(content=content, tree=build_tree(content))

    def directory_at(self, path: Sequence[str]) -> DirectoryNode:
        """Directory at `path`, falling back to the root if it vanished."""
        node = self.tree.resolve(path)
        return node if isinstance(node, DirectoryNode) else self.tree


def _output(text: str) -> HistoryEntry:
    return HistoryEntry(EntryKind.OUTPUT, text)


def format_results(results: Sequence[SearchResult], with_tip: bool = False) -> str:
    """Render search results the way the terminal prints them.

    Example:
        >>> format_results([])
        'Fuzzy search results (0): No results.'
    """
    if not results:
        return NO_RESULTS
    lines = "\n".join(
        f"{index}. [{result.section.value}] {result.title}\n"
        f"   {result.snippet}\n"
        f"   {'→ ' + result.href if result.href else ''}"
        for index, result in enumerate(results, start=1)
    )
    block = f"Fuzzy search results ({len(results)}):\n{lines}"
    if with_tip:
        block += f"\n{SEARCH_TIP}"
    return block


# -- command handlers --------------------------------------------------------
#
# Each handler receives (context, state, args) and returns the output entries,
# the next state and any environment requests.

_Result = Tuple[List[HistoryEntry], ShellState, List[EnvironmentRequest]]


def _cmd_help(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    return [_output(HELP_TEXT)], state, []


def _cmd_ls(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    node = context.directory_at(state.path)
    listing = "\n".join(node.directory_names() + node.file_names()) or "."
    return [_output(listing)], state, []


def _cmd_cd(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    if not args:
        return [], state.evolve(path=()), []
    target = args[0]
    if target == "..":
        return [], state.evolve(path=state.path[:-1]), []
    next_path = state.path + (target,)
    if not isinstance(context.tree.resolve(next_path), DirectoryNode):
        return [_output(ERR_NO_SUCH_DIRECTORY)], state, []
    return [], state.evolve(path=next_path), []


def _cmd_cat(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    if not args:
        return [_output(USAGE_CAT)], state, []
    node = context.tree.resolve(state.path + (args[0],))
    if not isinstance(node, FileNode):
        return [_output(ERR_FILE_NOT_FOUND)], state, []
    return [_output(node.read())], state, []


def _cmd_open(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    if not args:
        return [_output(USAGE_OPEN)], state, []
    target = args[0]
    if target.startswith("#") and len(target) > 1:
        section = target[1:]
    elif target in SECTION_COMMANDS:
        section = target
    else:
        return [_output(f"Opening {target} ...")], state, [EnvironmentRequest(OPEN_EXTERNAL, target)]
    anchor = f"#{section}"
    return [_output(f"Navigating to {anchor}")], state, [EnvironmentRequest(NAVIGATE, anchor)]


def _cmd_search(context: ShellContext, state: ShellState, args: List[str]) -> _Result:
    query = " ".join(args)
    if not query:
        entry = HistoryEntry(EntryKind.SYSTEM, SEARCH_MODE_PROMPT)
        return [entry], state.evolve(mode=ShellMode.AWAITING_SEARCH_QUERY, input_buffer=""), []
    return [_output(format_results(search_content(query, context.content)))], state, []


_Handler = Callable[[ShellContext, ShellState, List[str]], _Result]

COMMANDS: Dict[str, _Handler] = {
    "help": _cmd_help,
    "ls": _cmd_ls,
    "l": _cmd_ls,
    "cd": _cmd_cd,
    "cat": _cmd_cat,
    "open": _cmd_open,
    "search": _cmd_search,
}


def execute(context: ShellContext, state: ShellState, line: str) -> Transition:
    """Execute one submitted line.

    Args:
        context: Session content and tree
        state: State before the line
        line: Raw submitted text

    Returns:
        Transition with the next state, the appended entries (input entry
        first) and requested side effects. A blank line is a no-op.
    """
    text = line.strip()
    if not text:
        return Transition(state=state)

    input_entry = HistoryEntry(EntryKind.INPUT, text)

    if state.mode is ShellMode.AWAITING_SEARCH_QUERY:
        results = search_content(text, context.content)
        entries = (input_entry, _output(format_results(results, with_tip=True)))
        next_state = state.with_entries(entries).evolve(mode=ShellMode.NORMAL)
        return Transition(state=next_state, entries=entries)

    command, *args = text.split()

    if command == "clear":
        return Transition(state=state.evolve(history=()), entries=(), cleared=True)

    if command in SECTION_COMMANDS:
        outputs: List[HistoryEntry] = [_output(SectionFormatter.format_section(command, context.content))]
        next_state, requests = state, []
    elif command in COMMANDS:
        outputs, next_state, requests = COMMANDS[command](context, state, args)
    else:
        outputs, next_state, requests = [_output(ERR_COMMAND_NOT_FOUND)], state, []

    entries = (input_entry, *outputs)
    return Transition(
        state=next_state.with_entries(entries),
        entries=entries,
        requests=tuple(requests),
    )
