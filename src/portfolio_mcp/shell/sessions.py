"""In-memory registry of shell sessions for the MCP server."""

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
import logging
from threading import Lock
from typing import Callable, Iterator, List, Optional

from portfolio_mcp.config import get_server_config
from portfolio_mcp.shell.interpreter import ShellInterpreter

logger = logging.getLogger("portfolio-mcp.sessions")


@dataclass
class SessionRecord:
    session_id: str
    interpreter: ShellInterpreter
    created_at: datetime
    last_used: datetime
    lock: Lock = field(default_factory=Lock, repr=False)


class ShellSessionManager:
    """Lock-protected session registry with least-recently-used eviction.

    Each session owns its own lock; `use()` holds it for the duration of a
    call so operations on one session never interleave, while different
    sessions proceed independently.
    """

    def __init__(
        self,
        max_sessions: int = 64,
        factory: Optional[Callable[[], ShellInterpreter]] = None,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._factory = factory or ShellInterpreter
        self._sessions: "OrderedDict[str, SessionRecord]" = OrderedDict()
        self._lock = Lock()

    def get_or_create(self, session_id: str) -> SessionRecord:
        now = datetime.now()
        with self._lock:
            record = self._sessions.get(session_id)
            if record is not None:
                record.last_used = now
                self._sessions.move_to_end(session_id)
                return record

            record = SessionRecord(
                session_id=session_id,
                interpreter=self._factory(),
                created_at=now,
                last_used=now,
            )
            self._sessions[session_id] = record
            logger.debug("Created shell session %s", session_id)
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted least recently used shell session %s", evicted)
            return record

    @contextmanager
    def use(self, session_id: str) -> Iterator[ShellInterpreter]:
        """Hold a session's lock and yield its interpreter."""
        record = self.get_or_create(session_id)
        with record.lock:
            yield record.interpreter

    def get(self, session_id: str) -> Optional[SessionRecord]:
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def session_ids(self) -> List[str]:
        """Session ids, least recently used first."""
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_session_manager: Optional[ShellSessionManager] = None


def get_session_manager() -> ShellSessionManager:
    global _session_manager
    if _session_manager is None:
        _session_manager = ShellSessionManager(max_sessions=get_server_config().max_sessions)
    return _session_manager
