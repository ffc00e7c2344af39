"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import LetterStatus, ResolvedGuess, RoomEvent, RoomStatus, Slot, fresh_slots
from .participant import Participant

__all__ = [
    'LetterStatus', 'ResolvedGuess', 'RoomEvent', 'RoomStatus', 'Slot', 'fresh_slots',
    'Participant'
]
