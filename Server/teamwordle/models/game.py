"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LetterStatus(Enum):
    """Per-letter classification of an evaluated guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class RoomStatus(Enum):
    """Lifecycle of a room. Only FILLING accepts letters."""
    FILLING = "filling"
    WON = "won"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self is not RoomStatus.FILLING


@dataclass
class Slot:
    """One letter position of the shared row."""
    locked: bool = False
    letter: str = ""
    owner_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'locked': self.locked, 'letter': self.letter, 'byClientId': self.owner_token}


@dataclass
class ResolvedGuess:
    """An evaluated row, kept in the room history."""
    guess: str
    colors: List[LetterStatus]
    invalid: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guess': self.guess,
            'colors': [status.value for status in self.colors],
            'invalid': self.invalid
        }


@dataclass
class RoomEvent:
    """
    Outbound message produced by a room transition.

    A target of None means the event goes to every connection bound to the
    room; otherwise it is delivered to that connection handle only.
    """
    name: str
    payload: Dict[str, Any] = field(default_factory=dict)
    target: Optional[str] = None

    @property
    def is_broadcast(self) -> bool:
        return self.target is None


def fresh_slots(count: int) -> List[Slot]:
    return [Slot() for _ in range(count)]
