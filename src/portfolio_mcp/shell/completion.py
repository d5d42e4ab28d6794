"""Tab completion for the shell.

Policy:
    - Completion only applies when the caret is at the end of the input
    - In first-token position candidates are the built-in commands followed
      by the section names
    - After ``cd`` candidates are ".." followed by the working directory's
      subdirectories; after ``cat`` they are its files
    - One candidate replaces the partial token (plus a trailing space);
      several candidates extend it to their longest common prefix, or are
      listed as an output entry when no extension is possible
"""

import os
from dataclasses import dataclass
from typing import List, Tuple

from portfolio_mcp.shell.commands import BASE_COMMANDS, SECTION_COMMANDS, ShellContext
from portfolio_mcp.shell.state import EntryKind, HistoryEntry, ShellState

CANDIDATE_SEPARATOR = "    "

ALL_COMMANDS = BASE_COMMANDS + tuple(name for name in SECTION_COMMANDS if name not in BASE_COMMANDS)


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of one completion request.

    Attributes:
        text: Input text after completion (unchanged when nothing applies)
        candidates: Every candidate matching the partial token
        listed: True when the candidates were appended to history because
            no single completion or common-prefix extension was possible
    """

    text: str
    candidates: Tuple[str, ...] = ()
    listed: bool = False


def split_partial(text: str) -> Tuple[List[str], str, bool]:
    """Split input into (words, partial token, first-token position).

    >>> split_partial("cd pr")
    (['cd', 'pr'], 'pr', False)
    >>> split_partial("cd ")
    (['cd'], '', False)
    >>> split_partial("pro")
    (['pro'], 'pro', True)
    """
    words = text.split()
    if words and text[-1].isspace():
        return words, "", False
    partial = words[-1] if words else ""
    return words, partial, len(words) <= 1


def candidates_for(context: ShellContext, state: ShellState, text: str) -> List[str]:
    """Candidates for the partial token at the end of `text`."""
    words, partial, first_token = split_partial(text)
    if first_token:
        return [name for name in ALL_COMMANDS if name.startswith(partial)]

    node = context.directory_at(state.path)
    command = words[0]
    if command == "cd":
        pool = [".."] + node.directory_names()
    elif command == "cat":
        pool = node.file_names()
    else:
        return []
    return [name for name in pool if name.startswith(partial)]


def complete(
    context: ShellContext,
    state: ShellState,
    text: str,
    caret_at_end: bool = True,
) -> Tuple[CompletionResult, ShellState]:
    """Complete `text` and return the result with the updated state.

    The state only changes when candidates are listed (one output entry is
    appended) and its input buffer always tracks the returned text.
    """
    if not caret_at_end:
        return CompletionResult(text=text), state.evolve(input_buffer=text)

    candidates = candidates_for(context, state, text)
    if not candidates:
        return CompletionResult(text=text), state.evolve(input_buffer=text)

    _, partial, _ = split_partial(text)
    before = text[: len(text) - len(partial)]

    if len(candidates) == 1:
        completed = f"{before}{candidates[0]} "
        return CompletionResult(text=completed, candidates=tuple(candidates)), state.evolve(input_buffer=completed)

    prefix = os.path.commonprefix(candidates)
    if len(prefix) > len(partial):
        completed = before + prefix
        return CompletionResult(text=completed, candidates=tuple(candidates)), state.evolve(input_buffer=completed)

    listing = HistoryEntry(EntryKind.OUTPUT, CANDIDATE_SEPARATOR.join(candidates))
    next_state = state.with_entries([listing]).evolve(input_buffer=text)
    return CompletionResult(text=text, candidates=tuple(candidates), listed=True), next_state
