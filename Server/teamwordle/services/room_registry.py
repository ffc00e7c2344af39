"""
Room Registry Service

Process-wide map of live rooms. Creates rooms with unique codes, looks them
up, and removes rooms that were abandoned before anyone played.
"""

import threading
from typing import Callable, Dict, List, Optional, Tuple

from ..config.game_settings import DEFAULT_MAX_ROUNDS, MAX_ROUNDS_LIMIT, MIN_ROUNDS, ROOM_CODE_LENGTH
from ..models.game import RoomEvent
from ..models.participant import Participant
from ..utils.game_logger import game_logger
from ..utils.helpers import make_code
from .exceptions import RoomNotFoundError
from .room import Room
from .word_catalog import WordCatalog


class RoomRegistry:
    """
    Thread-safe in-memory room registry.

    The registry lock serializes create (code check-then-insert), join
    (lookup-then-attach) and leave (detach-then-reap), so a room cannot be
    reaped between a successful lookup and the connection attaching to it.
    Lock order is always registry lock, then room lock.
    """

    def __init__(self,
                 catalog: WordCatalog,
                 default_max_rounds: int = DEFAULT_MAX_ROUNDS,
                 code_length: int = ROOM_CODE_LENGTH,
                 code_factory: Optional[Callable[[int], str]] = None):
        self.catalog = catalog
        self.default_max_rounds = default_max_rounds
        self.code_length = code_length
        self._code_factory = code_factory or make_code
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.Lock()

    def create(self, max_rounds: Optional[int] = None) -> Room:
        """Register a new room under an unused code."""
        rounds = max_rounds if isinstance(max_rounds, int) and not isinstance(max_rounds, bool) \
            and MIN_ROUNDS <= max_rounds <= MAX_ROUNDS_LIMIT else self.default_max_rounds

        with self._lock:
            code = self._code_factory(self.code_length)
            while code in self._rooms:
                code = self._code_factory(self.code_length)
            room = Room(code, self.catalog, max_rounds=rounds)
            self._rooms[code] = room

        game_logger.log_game_event(code, 'room_created', max_rounds=rounds)
        return room

    def get(self, room_id: Optional[str]) -> Optional[Room]:
        if not room_id:
            return None
        with self._lock:
            return self._rooms.get(self.normalize_code(room_id))

    def rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms.values())

    def join(self, room_id: Optional[str], handle: str, name) -> Tuple[Room, Participant, List[RoomEvent]]:
        """
        Attach a connection to a room atomically with the lookup.

        Raises:
            RoomNotFoundError: if no live room has this code
            RoomFullError: if every slot is bound
        """
        with self._lock:
            room = self._rooms.get(self.normalize_code(room_id)) if room_id else None
            if room is None:
                raise RoomNotFoundError()
            participant, events = room.join(handle, name)
        return room, participant, events

    def leave(self, room_id: str, handle: str) -> List[RoomEvent]:
        """Detach a connection and reap its room if it is now abandoned."""
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return []
            events = room.leave(handle)
            self._reap_locked(room_id)
        return events

    def reap(self, room_id: str) -> bool:
        """Remove the room if it has no connections and no history."""
        with self._lock:
            return self._reap_locked(room_id)

    def _reap_locked(self, room_id: str) -> bool:
        room = self._rooms.get(room_id)
        if room is None or not room.is_abandoned():
            return False
        del self._rooms[room_id]
        game_logger.log_game_event(room_id, 'room_reaped')
        return True

    @staticmethod
    def normalize_code(room_id: str) -> str:
        return str(room_id).strip().upper()


# Global service instance
_room_registry = None


def get_room_registry() -> Optional[RoomRegistry]:
    """Get the global room registry instance."""
    return _room_registry


def initialize_room_registry(catalog: WordCatalog,
                             default_max_rounds: int = DEFAULT_MAX_ROUNDS,
                             code_length: int = ROOM_CODE_LENGTH) -> RoomRegistry:
    """Initialize the global room registry instance."""
    global _room_registry
    _room_registry = RoomRegistry(catalog, default_max_rounds, code_length)
    return _room_registry
