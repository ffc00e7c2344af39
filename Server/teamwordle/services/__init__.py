"""
Services Package

Contains all business logic and service classes.
"""

from .exceptions import LobbyError, RoomFullError, RoomNotFoundError
from .room import Room
from .room_registry import RoomRegistry, get_room_registry, initialize_room_registry
from .scoring import score_guess
from .word_catalog import WordCatalog, get_word_catalog, initialize_word_catalog

__all__ = [
    'LobbyError', 'RoomFullError', 'RoomNotFoundError',
    'Room',
    'RoomRegistry', 'get_room_registry', 'initialize_room_registry',
    'score_guess',
    'WordCatalog', 'get_word_catalog', 'initialize_word_catalog'
]
