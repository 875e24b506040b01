"""
Session Registry

Process-wide map from opaque identifiers to live games and rooms. This is the
only shared mutable structure across unrelated sessions; everything else is
owned by the entity it resolves to.
"""

import threading
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..errors import NotFound
from ..utils.game_logger import game_logger

GAME = "game"
ROOM = "room"


@dataclass
class _Entry:
    kind: str
    entity: object
    last_access: float


class SessionRegistry:
    """
    Thread-safe registry of games and rooms.

    The registry lock only guards the identifier map. Work on an entity
    happens under that entity's own lock, after lookup, so different sessions
    never contend beyond the map access itself.
    """

    def __init__(self, idle_timeout_seconds: float = 1800, clock: Callable[[], float] = time.monotonic):
        self.idle_timeout_seconds = idle_timeout_seconds
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.RLock()

    def _new_id(self) -> str:
        session_id = uuid.uuid4().hex
        while session_id in self._entries:
            session_id = uuid.uuid4().hex
        return session_id

    def create(self, kind: str, factory: Callable[[str], object]) -> str:
        """
        Registers a new entity under a fresh identifier.

        Args:
            kind: GAME or ROOM
            factory: Builds the entity from its identifier

        Returns:
            str: The new session identifier
        """
        with self._lock:
            session_id = self._new_id()
            entity = factory(session_id)
            self._entries[session_id] = _Entry(kind=kind, entity=entity, last_access=self._clock())
        return session_id

    def replace(self, session_id: str, entity: object) -> None:
        """Swaps the entity behind an existing identifier, closing the old one."""
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                raise NotFound("Session not found")
            old_entity = entry.entity
            entry.entity = entity
            entry.last_access = self._clock()
        old_entity.close()

    def get(self, session_id: str, kind: Optional[str] = None):
        """
        Resolves an identifier and refreshes its idle timer.

        Raises:
            NotFound: If the identifier is unknown, expired, or of another kind
        """
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None or (kind is not None and entry.kind != kind):
                label = 'Room' if kind == ROOM else 'Game' if kind == GAME else 'Session'
                raise NotFound(f"{label} not found")
            entry.last_access = self._clock()
            return entry.entity

    def expire(self, session_id: str, reason: str = "explicit") -> bool:
        """
        Removes and closes an entity.

        Returns:
            bool: True if the identifier was live, False if not found
        """
        with self._lock:
            entry = self._entries.pop(session_id, None)
        if entry is None:
            return False
        entry.entity.close()
        game_logger.log_game_event(session_id, 'session_expired', 'system', kind=entry.kind, reason=reason)
        return True

    def sweep_idle(self, now: Optional[float] = None) -> List[str]:
        """
        Expires every entity idle for longer than the timeout.

        Returns:
            List of expired identifiers
        """
        now = self._clock() if now is None else now
        with self._lock:
            expired = {
                session_id: entry for session_id, entry in self._entries.items()
                if now - entry.last_access > self.idle_timeout_seconds
            }
            for session_id in expired:
                del self._entries[session_id]

        for session_id, entry in expired.items():
            entry.entity.close()
            game_logger.log_game_event(session_id, 'session_expired', 'system',
                                       kind=entry.kind, reason='idle_timeout')
        return list(expired)

    def count(self, kind: Optional[str] = None) -> int:
        with self._lock:
            if kind is None:
                return len(self._entries)
            return sum(1 for entry in self._entries.values() if entry.kind == kind)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._entries


# Global registry instance
_session_registry = None


def get_session_registry() -> Optional[SessionRegistry]:
    """Get the global session registry instance."""
    return _session_registry


def initialize_session_registry(idle_timeout_seconds: float = 1800) -> SessionRegistry:
    """Initialize the global session registry instance."""
    global _session_registry
    _session_registry = SessionRegistry(idle_timeout_seconds=idle_timeout_seconds)
    return _session_registry
